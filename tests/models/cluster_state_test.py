from unittest import TestCase

from ccs.models.cluster_state import ClusterState


class ClusterStateTests(TestCase):
    def test_regular_lifecycle(self):
        self.assertTrue(ClusterState.CREATED.can_transition_to(ClusterState.STARTING))
        self.assertTrue(ClusterState.STARTING.can_transition_to(ClusterState.RUNNING))
        self.assertTrue(ClusterState.STARTING.can_transition_to(ClusterState.ERROR))
        self.assertTrue(ClusterState.RUNNING.can_transition_to(ClusterState.STOPPING))
        self.assertTrue(ClusterState.STOPPING.can_transition_to(ClusterState.STOPPED))
        self.assertTrue(ClusterState.STOPPED.can_transition_to(ClusterState.STARTING))

    def test_deleting_is_reachable_from_every_state(self):
        for state in ClusterState:
            self.assertTrue(state.can_transition_to(ClusterState.DELETING), f"{state} -> Deleting")

    def test_illegal_transitions(self):
        self.assertFalse(ClusterState.CREATED.can_transition_to(ClusterState.RUNNING))
        self.assertFalse(ClusterState.ERROR.can_transition_to(ClusterState.STARTING))
        self.assertFalse(ClusterState.RUNNING.can_transition_to(ClusterState.STARTING))
        self.assertFalse(ClusterState.DELETING.can_transition_to(ClusterState.RUNNING))

    def test_str_is_the_state_name(self):
        self.assertEqual("Running", str(ClusterState.RUNNING))
