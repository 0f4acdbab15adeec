import logging

from ccs import config, exceptions
from ccs.models.instance_role import InstanceRole
from ccs.utils import bootstrap_renderer, credentials

MASTER_USER_PLACEHOLDER = "k8s_master.user"
MASTER_PASSWORD_PLACEHOLDER = "k8s_master.password"
MASTER_IP_PLACEHOLDER = "k8s_master.default_ip"


class InstanceProvisioner:
    """
    Creates, starts and verifies the master and node instances of a cluster, each booted with its rendered bootstrap
    data. An instance is recorded as a member of the cluster as soon as it has been created.
    """
    def __init__(self, cfg, catalog, network_service, instance_service, record_store, renderer,
                 password_generator=credentials.generate_password):
        self.logger = logging.getLogger(__name__)
        self.cfg = cfg
        self.catalog = catalog
        self.network_service = network_service
        self.instance_service = instance_service
        self.record_store = record_store
        self.renderer = renderer
        self.password_generator = password_generator

    def provision_master(self, cluster):
        """
        Provisions the master instance and persists the generated administrator credentials of the cluster

        ;param cluster: The Cluster to provision the master for
        ;return instance: The running master Instance
        """
        password = self.password_generator()
        user_data = self._render(cluster, InstanceRole.MASTER, {
            MASTER_USER_PLACEHOLDER: credentials.ADMIN_USER_NAME,
            MASTER_PASSWORD_PLACEHOLDER: password,
        }, secrets=[password])
        self.record_store.create_credential(cluster.id, credentials.ADMIN_USER_NAME, password)
        return self._provision(cluster, InstanceRole.MASTER, f"{cluster.name}-{InstanceRole.MASTER.host_name_suffix}", user_data)

    def provision_node(self, cluster, master_ip, node_index):
        """
        ;param cluster: The Cluster the node joins
        ;param master_ip: The private address of the cluster's master instance
        ;param node_index: The 1-based index of the node
        ;return instance: The running node Instance
        """
        user_data = self._render(cluster, InstanceRole.NODE, {MASTER_IP_PLACEHOLDER: master_ip})
        host_name = f"{cluster.name}-{InstanceRole.NODE.host_name_suffix}-{node_index}"
        return self._provision(cluster, InstanceRole.NODE, host_name, user_data)

    def _render(self, cluster, role, substitutions, secrets=()):
        template_path = config.setting(self.cfg, "cluster", role.config_key)
        rendered = self.renderer.render_template_file(template_path, substitutions)
        if self.logger.isEnabledFor(logging.DEBUG):
            masked = rendered
            for secret in secrets:
                masked = masked.replace(secret, "*****")
            self.logger.debug("Bootstrap data of the %s instance(s) of cluster [%s]:\n%s", role.name.lower(), cluster, masked)
        return bootstrap_renderer.encode_user_data(rendered)

    def _provision(self, cluster, role, host_name, user_data):
        zone = self._lookup("zone", cluster.zone_id, self.catalog.get_zone)
        service_offering = self._lookup("service offering", cluster.service_offering_id, self.catalog.get_service_offering)
        template = self._lookup("template", cluster.template_id, self.catalog.get_template)
        owner = self._lookup("account", cluster.account_id, self.catalog.get_account)
        network = self._lookup("network", cluster.network_id, self.network_service.get_network)

        self.logger.info("Provisioning %s instance [%s] of cluster [%s].", role.name.lower(), host_name, cluster)
        instance = self.instance_service.create_instance(zone, service_offering, template, network, owner, host_name,
                                                         cluster.description, user_data, cluster.key_pair)
        self.record_store.add_vm_mapping(cluster.id, instance.id)
        self._start(instance, host_name)

        instance = self.instance_service.get_instance(instance.id)
        if instance is None or not instance.running:
            state = instance.state if instance is not None else "missing"
            self.logger.error("Instance [%s] of cluster [%s] is [%s] after it was started.", host_name, cluster, state)
            raise exceptions.ProvisioningError(f"Failed to start {role.name.lower()} instance [{host_name}].")
        self.logger.info("Instance [%s] with id [%s] of cluster [%s] is running.", host_name, instance.id, cluster)
        return instance

    def _start(self, instance, host_name):
        try:
            self.instance_service.start_instance(instance.id)
        except (exceptions.CapacityError, exceptions.ResourceUnavailableError, exceptions.ConflictError):
            self.logger.exception("Failed to launch instance [%s].", host_name)
            raise
        except exceptions.CcsError as e:
            # the state check after the start call decides whether the instance came up
            self.logger.warning("Starting instance [%s] reported an error: %s", host_name, e)

    def _lookup(self, kind, entity_id, lookup):
        entity = lookup(entity_id)
        if entity is None:
            raise exceptions.NotFound(f"Unable to find {kind} with id [{entity_id}].")
        return entity
