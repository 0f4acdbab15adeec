from abc import ABC, abstractmethod


class FirewallService(ABC):
    @abstractmethod
    def create_ingress_rule(self, public_ip, protocol, start_port, end_port, cidrs):
        """
        Creates an ingress firewall rule on a public IP address. The rule is not active until it is applied.

        ;param public_ip: The PublicIpAddress to open
        ;param protocol: The protocol, e.g. "tcp"
        ;param start_port: First port of the range
        ;param end_port: Last port of the range
        ;param cidrs: List of source CIDRs allowed in
        ;return None
        """
        raise NotImplementedError

    @abstractmethod
    def apply_ingress_rules(self, public_ip, account):
        raise NotImplementedError
