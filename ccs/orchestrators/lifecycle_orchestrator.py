import logging

from ccs import exceptions
from ccs.models.cluster_state import ClusterState


class LifecycleOrchestrator:
    def __init__(self, instance_service, record_store):
        self.logger = logging.getLogger(__name__)
        self.instance_service = instance_service
        self.record_store = record_store

    def stop_cluster(self, cluster_id):
        """
        Stops all instances of a running cluster. Instances are kept so the cluster can be started again.

        ;param cluster_id: The id of the cluster
        ;return success: ``True`` if all instances were stopped
        """
        cluster = self.record_store.find_cluster(cluster_id)
        if cluster.state != ClusterState.RUNNING:
            raise exceptions.ValidationError(f"Cluster [{cluster}] cannot be stopped in state [{cluster.state}].")

        cluster = self.record_store.transition(cluster.id, ClusterState.STOPPING)
        for mapping in self.record_store.list_vm_mappings(cluster.id):
            try:
                self.instance_service.stop_instance(mapping.vm_id)
            except Exception as e:
                self.logger.error("Failed to stop instance [%s] of cluster [%s]: %s", mapping.vm_id, cluster, e)
                self.record_store.transition(cluster.id, ClusterState.ERROR)
                raise exceptions.InfraOperationError(f"Failed to stop instance [{mapping.vm_id}] of cluster [{cluster.name}]", e)
            self.logger.info("Stopped instance [%s] of cluster [%s].", mapping.vm_id, cluster)

        self.record_store.transition(cluster.id, ClusterState.STOPPED)
        return True
