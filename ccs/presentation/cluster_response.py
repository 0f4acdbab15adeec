from dataclasses import asdict, dataclass, field
from typing import List, Optional


@dataclass
class ClusterResponse:
    """The externally visible representation of a cluster."""

    id: str
    name: str
    description: str
    zone_id: str
    zone_name: Optional[str]
    cluster_size: int
    template_id: str
    service_offering_id: str
    service_offering_name: Optional[str]
    key_pair: Optional[str]
    state: str
    cores: int
    memory: int
    endpoint: str
    console_endpoint: str
    network_id: str
    network_name: Optional[str]
    virtual_machine_ids: List[str] = field(default_factory=list)
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    @staticmethod
    def from_cluster(cluster, catalog, network_service, instance_service, record_store):
        zone = catalog.get_zone(cluster.zone_id)
        offering = catalog.get_service_offering(cluster.service_offering_id)
        network = network_service.get_network(cluster.network_id)
        credential = record_store.get_credential(cluster.id)

        vm_ids = []
        for mapping in record_store.list_vm_mappings(cluster.id):
            if instance_service.get_instance(mapping.vm_id) is not None:
                vm_ids.append(mapping.vm_id)

        return ClusterResponse(
            id=cluster.id,
            name=cluster.name,
            description=cluster.description,
            zone_id=cluster.zone_id,
            zone_name=zone.name if zone else None,
            cluster_size=cluster.node_count,
            template_id=cluster.template_id,
            service_offering_id=cluster.service_offering_id,
            service_offering_name=offering.name if offering else None,
            key_pair=cluster.key_pair,
            state=cluster.state.value,
            cores=cluster.cores,
            memory=cluster.memory,
            endpoint=cluster.endpoint,
            console_endpoint=cluster.console_endpoint,
            network_id=cluster.network_id,
            network_name=network.name if network else None,
            virtual_machine_ids=vm_ids,
            username=credential.username if credential else None,
            password=credential.password if credential else None,
        )

    def as_dict(self):
        return asdict(self)
