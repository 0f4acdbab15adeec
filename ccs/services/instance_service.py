from abc import ABC, abstractmethod


class InstanceService(ABC):
    """
    Instance services manage the lifecycle of the virtual machines that make up a cluster.
    """

    @abstractmethod
    def create_instance(self, zone, service_offering, template, network, owner, host_name, display_name, user_data, key_pair):
        """
        Creates (but does not start) an instance

        ;param zone: The Zone to place the instance in
        ;param service_offering: The ServiceOffering defining cores and memory of the instance
        ;param template: The Template to boot the instance from
        ;param network: The Network to attach the instance to
        ;param owner: The Account owning the instance
        ;param host_name: The host name of the instance
        ;param display_name: A human readable description of the instance
        ;param user_data: Base64 encoded bootstrap data
        ;param key_pair: Name of the SSH key pair to install or ``None``
        ;return instance: An Instance object with a persisted id
        """
        raise NotImplementedError

    @abstractmethod
    def start_instance(self, instance_id):
        raise NotImplementedError

    @abstractmethod
    def stop_instance(self, instance_id):
        raise NotImplementedError

    @abstractmethod
    def destroy_instance(self, instance_id):
        raise NotImplementedError

    @abstractmethod
    def expunge_instance(self, instance_id):
        """
        Irreversibly removes a destroyed instance

        ;param instance_id: The id of the instance
        ;return None
        """
        raise NotImplementedError

    @abstractmethod
    def get_instance(self, instance_id):
        """
        ;param instance_id: The id of the instance
        ;return instance: The current Instance record or ``None`` if the instance does not exist
        """
        raise NotImplementedError
