from enum import Enum


class ClusterState(str, Enum):
    """
    Lifecycle states of a cluster. Deleting is reachable from every state; all other transitions are listed in
    ``_TRANSITIONS``.
    """
    CREATED = "Created"
    STARTING = "Starting"
    RUNNING = "Running"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    ERROR = "Error"
    DELETING = "Deleting"

    def can_transition_to(self, target):
        if target == ClusterState.DELETING:
            return True
        return target in _TRANSITIONS[self]

    def __str__(self):
        return self.value


_TRANSITIONS = {
    ClusterState.CREATED: {ClusterState.STARTING},
    ClusterState.STARTING: {ClusterState.RUNNING, ClusterState.ERROR},
    ClusterState.RUNNING: {ClusterState.STOPPING},
    ClusterState.STOPPING: {ClusterState.STOPPED, ClusterState.ERROR},
    ClusterState.STOPPED: {ClusterState.STARTING},
    ClusterState.ERROR: set(),
    ClusterState.DELETING: set(),
}
