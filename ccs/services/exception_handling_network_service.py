from ccs.exceptions import CcsError, InfraOperationError
from ccs.services.network_service import NetworkService


class ExceptionHandlingNetworkService(NetworkService):
    def __init__(self, network_service):
        self.network_service = network_service

    def create_network(self, network_offering, zone, owner, name, display_text, physical_network):
        try:
            return self.network_service.create_network(network_offering, zone, owner, name, display_text, physical_network)
        except CcsError:
            raise
        except Exception as e:
            raise InfraOperationError(f"Creating network \"{name}\" failed", e)

    def get_network(self, network_id):
        try:
            return self.network_service.get_network(network_id)
        except CcsError:
            raise
        except Exception as e:
            raise InfraOperationError(f"Looking up network \"{network_id}\" failed", e)

    def start_network(self, network_id, zone, owner):
        try:
            return self.network_service.start_network(network_id, zone, owner)
        except CcsError:
            raise
        except Exception as e:
            raise InfraOperationError(f"Starting network \"{network_id}\" failed", e)

    def destroy_network(self, network_id, owner):
        try:
            return self.network_service.destroy_network(network_id, owner)
        except CcsError:
            raise
        except Exception as e:
            raise InfraOperationError(f"Destroying network \"{network_id}\" failed", e)
