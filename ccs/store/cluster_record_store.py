import logging
import uuid

from ccs import exceptions, time
from ccs.models.cluster import Cluster, ClusterCredential, ClusterVmMapping
from ccs.models.cluster_state import ClusterState

MUTABLE_CLUSTER_FIELDS = ("endpoint", "console_endpoint", "removed")


def _generate_id():
    return str(uuid.uuid4())


class ClusterRecordStore:
    """
    The only writer of cluster, membership and credential records. Orchestrators change records exclusively through
    this class so that every state change is persisted before the next dependent step runs.
    """
    def __init__(self, entity_store, clock=time.Clock, id_generator=_generate_id):
        self.logger = logging.getLogger(__name__)
        self.entity_store = entity_store
        self.clock = clock
        self.id_generator = id_generator

    def create_cluster(self, name, description, zone_id, service_offering_id, template_id, network_id, domain_id,
                       account_id, node_count, cores, memory, key_pair=None):
        cluster = Cluster(id=self.id_generator(), name=name, description=description, zone_id=zone_id,
                          service_offering_id=service_offering_id, template_id=template_id, network_id=network_id,
                          domain_id=domain_id, account_id=account_id, node_count=node_count, cores=cores, memory=memory,
                          state=ClusterState.CREATED, key_pair=key_pair, created=self.clock.utc_now())
        cluster = self.entity_store.create(cluster)
        self.logger.info("Created cluster [%s] in state [%s].", cluster, cluster.state)
        return cluster

    def get_cluster(self, cluster_id):
        return self.entity_store.get(Cluster, cluster_id)

    def find_cluster(self, cluster_id):
        cluster = self.get_cluster(cluster_id)
        if cluster is None:
            raise exceptions.NotFound(f"Cluster with id [{cluster_id}] does not exist.")
        return cluster

    def list_clusters(self, account_id=None):
        filters = {} if account_id is None else {"account_id": account_id}
        return [c for c in self.entity_store.list(Cluster, **filters) if c.removed is None]

    def transition(self, cluster_id, target, **changes):
        """
        Moves a cluster to ``target`` and optionally updates mutable fields in the same atomic write.

        :param cluster_id: The id of the cluster.
        :param target: The new ClusterState.
        :param changes: New values of mutable fields, e.g. ``endpoint``.
        :return: The updated Cluster.
        """
        cluster = self.find_cluster(cluster_id)
        if not cluster.state.can_transition_to(target):
            raise exceptions.IllegalStateTransition(f"Cluster [{cluster}] cannot move from [{cluster.state}] to [{target}].")
        if target == ClusterState.RUNNING:
            members = len(self.list_vm_mappings(cluster_id))
            if members != cluster.instance_count:
                raise exceptions.IllegalStateTransition(f"Cluster [{cluster}] cannot be running with [{members}] of "
                                                        f"[{cluster.instance_count}] instance(s).")
        self._check_mutable(changes)
        changes["state"] = target
        updated = self.entity_store.update(Cluster, cluster_id, changes)
        self.logger.info("Cluster [%s] moved from [%s] to [%s].", updated, cluster.state, target)
        return updated

    def update_endpoints(self, cluster_id, endpoint=None, console_endpoint=None):
        changes = {}
        if endpoint is not None:
            changes["endpoint"] = endpoint
        if console_endpoint is not None:
            changes["console_endpoint"] = console_endpoint
        return self.entity_store.update(Cluster, cluster_id, changes)

    def add_vm_mapping(self, cluster_id, vm_id):
        mapping = ClusterVmMapping(id=self.id_generator(), cluster_id=cluster_id, vm_id=vm_id, created=self.clock.utc_now())
        return self.entity_store.create(mapping)

    def list_vm_mappings(self, cluster_id):
        return self.entity_store.list(ClusterVmMapping, cluster_id=cluster_id)

    def remove_vm_mapping(self, mapping_id):
        return self.entity_store.delete(ClusterVmMapping, mapping_id)

    def create_credential(self, cluster_id, username, password):
        if self.get_credential(cluster_id) is not None:
            raise exceptions.ConflictError(f"Credentials for cluster [{cluster_id}] already exist.")
        return self.entity_store.create(ClusterCredential(id=self.id_generator(), cluster_id=cluster_id,
                                                          username=username, password=password))

    def get_credential(self, cluster_id):
        credentials = self.entity_store.list(ClusterCredential, cluster_id=cluster_id)
        return credentials[0] if credentials else None

    def expunge_cluster(self, cluster_id):
        """
        Permanently removes a cluster and its credentials. All membership records must have been removed before.
        """
        remaining = self.list_vm_mappings(cluster_id)
        if remaining:
            raise exceptions.IllegalStateTransition(f"Cluster [{cluster_id}] still has [{len(remaining)}] instance(s).")
        credential = self.get_credential(cluster_id)
        if credential is not None:
            self.entity_store.delete(ClusterCredential, credential.id)
        self.entity_store.delete(Cluster, cluster_id)
        self.logger.info("Expunged cluster [%s].", cluster_id)

    def _check_mutable(self, changes):
        immutable = [k for k in changes if k not in MUTABLE_CLUSTER_FIELDS]
        if immutable:
            raise ValueError(f"Cannot change immutable cluster field(s) {immutable}.")
