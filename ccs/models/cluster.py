import datetime
from dataclasses import dataclass, field
from typing import Optional

from ccs.models.cluster_state import ClusterState


@dataclass
class Cluster:
    """
    A tenant visible cluster: one master instance, ``node_count`` worker instances and the network they share.

    :param cores: Total cores, computed once at creation from the service offering and never recomputed.
    :param memory: Total memory in MB, computed once at creation from the service offering and never recomputed.
    :param endpoint: Public URL of the cluster's management endpoint. Empty until the cluster is confirmed live.
    :param console_endpoint: URL of the cluster's dashboard. Empty unless it could be discovered.
    """
    id: str
    name: str
    description: str
    zone_id: str
    service_offering_id: str
    template_id: str
    network_id: str
    domain_id: str
    account_id: str
    node_count: int
    cores: int
    memory: int
    state: ClusterState = ClusterState.CREATED
    key_pair: Optional[str] = None
    endpoint: str = ""
    console_endpoint: str = ""
    created: Optional[datetime.datetime] = None
    removed: Optional[datetime.datetime] = None

    @property
    def instance_count(self):
        return self.node_count + 1

    def __str__(self):
        return f"{self.name} ({self.id})"


@dataclass
class ClusterVmMapping:
    """Records that instance ``vm_id`` belongs to cluster ``cluster_id``. Never updated."""

    id: str
    cluster_id: str
    vm_id: str
    created: Optional[datetime.datetime] = None


@dataclass
class ClusterCredential:
    """Administrative credentials of a cluster's management endpoint. At most one per cluster, never regenerated."""

    id: str
    cluster_id: str
    username: str
    password: str = field(repr=False)
