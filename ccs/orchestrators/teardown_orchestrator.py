import logging

from ccs import exceptions
from ccs.models.cluster_state import ClusterState
from ccs.services.access_checker import AccessType


class TeardownResult:
    """
    Collects the failures of a best-effort teardown. The first failure is kept as the cause of the aggregated error.
    """
    def __init__(self, cluster):
        self.cluster = cluster
        self.failed_instances = []
        self.network_error = None
        self.first_error = None

    def instance_failed(self, vm_id, error):
        self.failed_instances.append(vm_id)
        self._record(error)

    def network_failed(self, error):
        self.network_error = error
        self._record(error)

    def _record(self, error):
        if self.first_error is None:
            self.first_error = error

    @property
    def instance_teardown_failed(self):
        return len(self.failed_instances) > 0

    @property
    def network_teardown_failed(self):
        return self.network_error is not None

    @property
    def succeeded(self):
        return self.first_error is None

    def as_error(self):
        if self.succeeded:
            return None
        parts = []
        if self.failed_instances:
            parts.append(f"instance(s) {self.failed_instances}")
        if self.network_error is not None:
            parts.append(f"network [{self.cluster.network_id}]")
        return exceptions.PartialTeardownError(f"Could not destroy {' and '.join(parts)} of cluster [{self.cluster}].",
                                               self.first_error)


class TeardownOrchestrator:
    """
    Deletes clusters on a best-effort basis. Failing steps of any kind are logged and skipped; a cluster whose
    resources could not all be destroyed stays in state Deleting until an operator intervenes.
    """
    def __init__(self, catalog, network_service, instance_service, record_store, access_checker):
        self.logger = logging.getLogger(__name__)
        self.catalog = catalog
        self.network_service = network_service
        self.instance_service = instance_service
        self.record_store = record_store
        self.access_checker = access_checker

    def delete_cluster(self, cluster_id, caller):
        """
        ;param cluster_id: The id of the cluster to delete
        ;param caller: The Account requesting the deletion
        ;return success: ``True`` once the deletion has been carried out. Partial failures are logged and not reported.
        """
        cluster = self.record_store.find_cluster(cluster_id)
        self.access_checker.check_access(caller, cluster, AccessType.OPERATE)
        cluster = self.record_store.transition(cluster.id, ClusterState.DELETING)

        result = self.teardown(cluster)
        if result.succeeded:
            self.logger.info("Cluster [%s] is deleted.", cluster)
        else:
            self.logger.error("Cluster [%s] stays in state [%s]: %s", cluster, ClusterState.DELETING, result.as_error())
        return True

    def teardown(self, cluster):
        """
        Destroys the instances, then the network, then the records of a cluster in state Deleting.

        ;return result: A TeardownResult
        """
        result = TeardownResult(cluster)

        for mapping in self.record_store.list_vm_mappings(cluster.id):
            try:
                self.instance_service.destroy_instance(mapping.vm_id)
                self.instance_service.expunge_instance(mapping.vm_id)
                self.record_store.remove_vm_mapping(mapping.id)
                self.logger.info("Destroyed instance [%s] of cluster [%s].", mapping.vm_id, cluster)
            except Exception as e:  # pylint: disable=broad-except
                self.logger.warning("Failed to destroy instance [%s] of cluster [%s]: %s", mapping.vm_id, cluster, e)
                self.logger.info("Continuing to destroy the remaining resources of cluster [%s].", cluster)
                result.instance_failed(mapping.vm_id, e)

        if not result.instance_teardown_failed:
            try:
                owner = self.catalog.get_account(cluster.account_id)
                if owner is None:
                    raise exceptions.NotFound(f"Unable to find account with id [{cluster.account_id}].")
                self.network_service.destroy_network(cluster.network_id, owner)
                self.logger.info("Destroyed network [%s] of cluster [%s].", cluster.network_id, cluster)
            except Exception as e:  # pylint: disable=broad-except
                self.logger.error("Failed to destroy network [%s] of cluster [%s]: %s", cluster.network_id, cluster, e)
                result.network_failed(e)

        if result.succeeded:
            self.record_store.expunge_cluster(cluster.id)
        return result
