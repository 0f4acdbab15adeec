from abc import ABC, abstractmethod


class NetworkService(ABC):
    """
    Network services create, start and destroy the isolated networks that cluster instances are attached to.
    """

    @abstractmethod
    def create_network(self, network_offering, zone, owner, name, display_text, physical_network):
        """
        Creates an isolated guest network

        ;param network_offering: A NetworkOffering object defining the services of the network
        ;param zone: The Zone in which to create the network
        ;param owner: The Account owning the network
        ;param name: The name of the network
        ;param display_text: A human readable description of the network
        ;param physical_network: The PhysicalNetwork backing the guest network
        ;return network: A Network object
        """
        raise NotImplementedError

    @abstractmethod
    def get_network(self, network_id):
        """
        ;param network_id: The id of the network
        ;return network: A Network object or ``None`` if there is no network with this id
        """
        raise NotImplementedError

    @abstractmethod
    def start_network(self, network_id, zone, owner):
        """
        Implements the network in the given zone so instances can be attached to it

        ;param network_id: The id of the network
        ;param zone: The Zone to deploy the network to
        ;param owner: The Account owning the network
        ;return None
        """
        raise NotImplementedError

    @abstractmethod
    def destroy_network(self, network_id, owner):
        """
        ;param network_id: The id of the network
        ;param owner: The Account owning the network
        ;return None
        """
        raise NotImplementedError
