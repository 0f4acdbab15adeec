from ccs.exceptions import CcsError, ProvisioningError
from ccs.services.instance_service import InstanceService


class ExceptionHandlingInstanceService(InstanceService):
    """
    Passes typed errors (capacity, unavailability, conflicts) through and reports anything else as a ProvisioningError.
    """
    def __init__(self, instance_service):
        self.instance_service = instance_service

    def create_instance(self, zone, service_offering, template, network, owner, host_name, display_name, user_data, key_pair):
        return self._call(f"Creating instance \"{host_name}\"", self.instance_service.create_instance, zone, service_offering,
                          template, network, owner, host_name, display_name, user_data, key_pair)

    def start_instance(self, instance_id):
        return self._call(f"Starting instance \"{instance_id}\"", self.instance_service.start_instance, instance_id)

    def stop_instance(self, instance_id):
        return self._call(f"Stopping instance \"{instance_id}\"", self.instance_service.stop_instance, instance_id)

    def destroy_instance(self, instance_id):
        return self._call(f"Destroying instance \"{instance_id}\"", self.instance_service.destroy_instance, instance_id)

    def expunge_instance(self, instance_id):
        return self._call(f"Expunging instance \"{instance_id}\"", self.instance_service.expunge_instance, instance_id)

    def get_instance(self, instance_id):
        return self._call(f"Looking up instance \"{instance_id}\"", self.instance_service.get_instance, instance_id)

    def _call(self, description, func, *args):
        try:
            return func(*args)
        except CcsError:
            raise
        except Exception as e:
            raise ProvisioningError(f"{description} failed", e)
