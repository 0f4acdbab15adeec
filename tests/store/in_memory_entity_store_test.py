from unittest import TestCase

from ccs import exceptions
from ccs.models.cluster import ClusterVmMapping
from ccs.store.in_memory_entity_store import InMemoryEntityStore


class InMemoryEntityStoreTests(TestCase):
    def setUp(self):
        self.store = InMemoryEntityStore()

    def test_create_and_get(self):
        self.store.create(ClusterVmMapping(id="m1", cluster_id="c1", vm_id="vm-1"))

        self.assertEqual(ClusterVmMapping(id="m1", cluster_id="c1", vm_id="vm-1"), self.store.get(ClusterVmMapping, "m1"))
        self.assertIsNone(self.store.get(ClusterVmMapping, "m2"))

    def test_duplicate_id_is_rejected(self):
        self.store.create(ClusterVmMapping(id="m1", cluster_id="c1", vm_id="vm-1"))

        with self.assertRaises(exceptions.ConflictError):
            self.store.create(ClusterVmMapping(id="m1", cluster_id="c1", vm_id="vm-2"))

    def test_returned_records_are_copies(self):
        created = self.store.create(ClusterVmMapping(id="m1", cluster_id="c1", vm_id="vm-1"))
        created.vm_id = "changed"
        self.store.get(ClusterVmMapping, "m1").vm_id = "changed as well"

        self.assertEqual("vm-1", self.store.get(ClusterVmMapping, "m1").vm_id)

    def test_update(self):
        self.store.create(ClusterVmMapping(id="m1", cluster_id="c1", vm_id="vm-1"))

        updated = self.store.update(ClusterVmMapping, "m1", {"vm_id": "vm-2"})

        self.assertEqual("vm-2", updated.vm_id)
        self.assertEqual("vm-2", self.store.get(ClusterVmMapping, "m1").vm_id)

    def test_update_missing_record(self):
        with self.assertRaises(exceptions.NotFound):
            self.store.update(ClusterVmMapping, "m1", {"vm_id": "vm-2"})

    def test_delete(self):
        self.store.create(ClusterVmMapping(id="m1", cluster_id="c1", vm_id="vm-1"))

        self.assertTrue(self.store.delete(ClusterVmMapping, "m1"))
        self.assertFalse(self.store.delete(ClusterVmMapping, "m1"))
        self.assertIsNone(self.store.get(ClusterVmMapping, "m1"))

    def test_list_filters_and_keeps_insertion_order(self):
        self.store.create(ClusterVmMapping(id="m2", cluster_id="c1", vm_id="vm-2"))
        self.store.create(ClusterVmMapping(id="m1", cluster_id="c1", vm_id="vm-1"))
        self.store.create(ClusterVmMapping(id="m3", cluster_id="c2", vm_id="vm-3"))

        self.assertEqual(["vm-2", "vm-1"], [m.vm_id for m in self.store.list(ClusterVmMapping, cluster_id="c1")])
        self.assertEqual(3, len(self.store.list(ClusterVmMapping)))
