from abc import ABC, abstractmethod


class Catalog(ABC):
    """
    Read-only lookups of zones, offerings, templates, accounts and the network resources of a zone. All ``get_*``
    and ``find_*`` methods return ``None`` if nothing matches.
    """

    @abstractmethod
    def get_zone(self, zone_id):
        raise NotImplementedError

    @abstractmethod
    def get_service_offering(self, service_offering_id):
        raise NotImplementedError

    @abstractmethod
    def get_template(self, template_id):
        raise NotImplementedError

    @abstractmethod
    def find_template_by_name(self, name):
        raise NotImplementedError

    @abstractmethod
    def find_network_offering_by_name(self, unique_name):
        raise NotImplementedError

    @abstractmethod
    def find_physical_network(self, zone_id, tags, traffic_type):
        """
        ;return physical_network: The PhysicalNetwork in the zone matching the offering's tags and traffic type
        """
        raise NotImplementedError

    @abstractmethod
    def find_ssh_key_pair(self, account_id, domain_id, name):
        raise NotImplementedError

    @abstractmethod
    def get_account(self, account_id):
        raise NotImplementedError

    @abstractmethod
    def list_public_ips(self, network_id):
        """
        ;param network_id: The id of a network
        ;return public_ips: The PublicIpAddress objects associated with the network in a stable order
        """
        raise NotImplementedError
