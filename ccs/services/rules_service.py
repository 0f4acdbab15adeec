from abc import ABC, abstractmethod


class RulesService(ABC):
    @abstractmethod
    def create_port_forwarding_rule(self, public_ip, public_port, private_port, private_ip, protocol, network_id, owner, instance_id):
        """
        Creates a port forwarding rule from a public IP address to an instance. Fails with a ConflictError if the rule
        clashes with an existing one.

        ;param public_ip: The PublicIpAddress traffic arrives on
        ;param public_port: The port on the public IP address
        ;param private_port: The port on the instance
        ;param private_ip: The private address of the instance
        ;param protocol: The protocol, e.g. "tcp"
        ;param network_id: The network of the instance
        ;param owner: The Account owning the rule
        ;param instance_id: The id of the instance traffic is forwarded to
        ;return None
        """
        raise NotImplementedError

    @abstractmethod
    def apply_port_forwarding_rules(self, public_ip, account):
        raise NotImplementedError
