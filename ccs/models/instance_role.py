from enum import Enum


class InstanceRole(Enum):
    """
    The role an instance plays in a cluster.

    :param host_name_suffix: Appended to the cluster name to form the host name of instances with that role
    :param config_key: The key in the ``cluster`` config section naming the bootstrap template for the role
    """

    def __init__(self, host_name_suffix, config_key):
        self.host_name_suffix = host_name_suffix
        self.config_key = config_key

    MASTER = "k8s-master", "master.cloudconfig"
    NODE = "k8s-node", "node.cloudconfig"
