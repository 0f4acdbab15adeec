from unittest import TestCase, mock
from unittest.mock import Mock

from ccs import exceptions
from ccs.models.cluster_state import ClusterState
from ccs.orchestrators.lifecycle_orchestrator import LifecycleOrchestrator
from ccs.store.cluster_record_store import ClusterRecordStore
from ccs.store.in_memory_entity_store import InMemoryEntityStore


class LifecycleOrchestratorTests(TestCase):
    def setUp(self):
        self.record_store = ClusterRecordStore(InMemoryEntityStore())
        self.instance_service = Mock()
        self.orchestrator = LifecycleOrchestrator(self.instance_service, self.record_store)
        self.cluster = self.record_store.create_cluster(name="demo", description="Demo cluster", zone_id="zone-1",
                                                        service_offering_id="so-1", template_id="tpl-1",
                                                        network_id="net-1", domain_id="dom-1", account_id="acc-1",
                                                        node_count=1, cores=2, memory=2048)

    def start(self):
        self.record_store.transition(self.cluster.id, ClusterState.STARTING)
        self.record_store.add_vm_mapping(self.cluster.id, "vm-master")
        self.record_store.add_vm_mapping(self.cluster.id, "vm-node-1")
        self.record_store.transition(self.cluster.id, ClusterState.RUNNING)

    def test_stop_cluster(self):
        self.start()

        self.assertTrue(self.orchestrator.stop_cluster(self.cluster.id))

        self.instance_service.stop_instance.assert_has_calls([mock.call("vm-master"), mock.call("vm-node-1")])
        self.assertEqual(ClusterState.STOPPED, self.record_store.find_cluster(self.cluster.id).state)
        self.assertEqual(2, len(self.record_store.list_vm_mappings(self.cluster.id)))

    def test_stop_failure(self):
        self.start()
        self.instance_service.stop_instance.side_effect = exceptions.ProvisioningError("hypervisor unreachable")

        with self.assertRaisesRegex(exceptions.InfraOperationError, r"Failed to stop instance \[vm-master\]"):
            self.orchestrator.stop_cluster(self.cluster.id)

        self.assertEqual(ClusterState.ERROR, self.record_store.find_cluster(self.cluster.id).state)

    def test_unexpected_stop_failure(self):
        self.start()
        self.instance_service.stop_instance.side_effect = [None, RuntimeError("connection reset")]

        with self.assertRaisesRegex(exceptions.InfraOperationError, r"Failed to stop instance \[vm-node-1\]"):
            self.orchestrator.stop_cluster(self.cluster.id)

        self.assertEqual(ClusterState.ERROR, self.record_store.find_cluster(self.cluster.id).state)

    def test_only_running_clusters_can_be_stopped(self):
        with self.assertRaisesRegex(exceptions.ValidationError, r"cannot be stopped in state \[Created\]"):
            self.orchestrator.stop_cluster(self.cluster.id)

        self.instance_service.stop_instance.assert_not_called()
