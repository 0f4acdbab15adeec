import contextlib
import logging

from ccs import config, exceptions, time
from ccs.models.cluster_state import ClusterState

INGRESS_CIDRS = ["0.0.0.0/0"]
PROTOCOL = "tcp"


class ProvisioningOrchestrator:
    """
    Creates clusters and brings them up: network, master, nodes, firewall and port forwarding rules, then waits until
    the management endpoint is reachable. Every step runs sequentially and every failure is recorded as the Error state
    before it is raised. Instances that were already created are left running.
    """
    def __init__(self, cfg, catalog, network_service, instance_service, firewall_service, rules_service, record_store,
                 instance_provisioner, readiness_probe, waiter, dashboard_discovery, clock=time.Clock):
        self.logger = logging.getLogger(__name__)
        self.cfg = cfg
        self.catalog = catalog
        self.network_service = network_service
        self.instance_service = instance_service
        self.firewall_service = firewall_service
        self.rules_service = rules_service
        self.record_store = record_store
        self.instance_provisioner = instance_provisioner
        self.readiness_probe = readiness_probe
        self.waiter = waiter
        self.dashboard_discovery = dashboard_discovery
        self.clock = clock

    def create_cluster(self, name, display_name, zone, service_offering, owner, node_count, network_id=None, ssh_key_pair=None):
        """
        Validates a cluster request, creates a network if none is given and persists the cluster in state Created.
        Nothing is persisted if a precondition fails.

        ;return cluster: The created Cluster
        """
        if not name:
            raise exceptions.ValidationError("A cluster name is required.")
        if not isinstance(node_count, int) or isinstance(node_count, bool) or node_count < 1:
            raise exceptions.ValidationError(f"Node count must be a positive integer but was [{node_count}].")

        template_name = config.setting(self.cfg, "cluster", "template.name")
        config.setting(self.cfg, "cluster", "master.cloudconfig")
        config.setting(self.cfg, "cluster", "node.cloudconfig")

        if network_id is not None:
            network = self.network_service.get_network(network_id)
            if network is None:
                raise exceptions.NotFound(f"Unable to find network by id [{network_id}].")
            network_offering = physical_network = None
        else:
            network = None
            network_offering, physical_network = self._default_network_offering(zone)

        if ssh_key_pair:
            if self.catalog.find_ssh_key_pair(owner.id, owner.domain_id, ssh_key_pair) is None:
                raise exceptions.NotFound(f"A key pair with name [{ssh_key_pair}] was not found.")

        template = self.catalog.find_template_by_name(template_name)
        if template is None:
            raise exceptions.ConfigError(f"Unable to find the template [{template_name}] to be used for provisioning clusters.")

        if network is None:
            self.logger.info("Creating network for account [%s] from network offering [%s] for cluster [%s].",
                             owner.name, network_offering.name, name)
            network = self.network_service.create_network(network_offering, zone, owner, f"{name}-network",
                                                          f"{owner.name}-network", physical_network)

        # TODO: Clarify whether the master instance should be included in the resource totals.
        cores = service_offering.cpu * node_count
        memory = service_offering.ram * node_count

        return self.record_store.create_cluster(name=name, description=display_name, zone_id=zone.id,
                                                service_offering_id=service_offering.id, template_id=template.id,
                                                network_id=network.id, domain_id=owner.domain_id, account_id=owner.id,
                                                node_count=node_count, cores=cores, memory=memory,
                                                key_pair=ssh_key_pair or None)

    def _default_network_offering(self, zone):
        offering_name = config.setting(self.cfg, "cluster", "network.offering")
        offering = self.catalog.find_network_offering_by_name(offering_name)
        if offering is None:
            raise exceptions.ConfigError(f"Network offering [{offering_name}] does not exist.")
        if not offering.enabled:
            raise exceptions.ConfigError(f"Network offering [{offering_name}] is not enabled.")
        if not offering.supports_source_nat:
            raise exceptions.ConfigError(f"Network offering [{offering_name}] does not provide the source NAT service.")
        if not offering.egress_default_policy:
            raise exceptions.ConfigError(f"Network offering [{offering_name}] has its default egress policy turned off.")
        physical_network = self.catalog.find_physical_network(zone.id, offering.tags, offering.traffic_type)
        if physical_network is None:
            raise exceptions.ConfigError(f"Unable to find a physical network in zone [{zone.name}] with tags [{offering.tags}].")
        return offering, physical_network

    def start_cluster(self, cluster_id):
        """
        Provisions a Created cluster or restarts the instances of a Stopped one and waits until it is reachable.

        ;param cluster_id: The id of the cluster
        ;return cluster: The Cluster in state Running or Error
        """
        cluster = self.record_store.find_cluster(cluster_id)
        if cluster.state not in (ClusterState.CREATED, ClusterState.STOPPED):
            raise exceptions.ValidationError(f"Cluster [{cluster}] cannot be started in state [{cluster.state}].")
        resume = cluster.state == ClusterState.STOPPED

        stop_watch = self.clock.stop_watch()
        stop_watch.start()
        cluster = self.record_store.transition(cluster.id, ClusterState.STARTING)

        with self._error_state_on_failure(cluster, "Starting the network"):
            owner = self._lookup("account", cluster.account_id, self.catalog.get_account)
            zone = self._lookup("zone", cluster.zone_id, self.catalog.get_zone)
            self.network_service.start_network(cluster.network_id, zone, owner)

        if resume:
            public_ip = self._restart_instances(cluster)
        else:
            public_ip = self._provision_instances(cluster, owner)

        cluster = self._await_readiness(cluster, public_ip)
        stop_watch.stop()
        self.logger.info("Starting cluster [%s] finished in state [%s] after [%.1f] seconds.", cluster, cluster.state,
                         stop_watch.total_time())
        return cluster

    def _provision_instances(self, cluster, owner):
        with self._error_state_on_failure(cluster, "Provisioning the master instance"):
            master = self.instance_provisioner.provision_master(cluster)
        with self._error_state_on_failure(cluster, "Resolving the cluster addresses"):
            master_ip = master.private_ip
            if not master_ip:
                raise exceptions.ProvisioningError(f"Master instance [{master.id}] has no private IP address.")
            public_ip = self._public_ip(cluster)

        self.logger.info("Provisioning [%d] node instance(s) of cluster [%s].", cluster.node_count, cluster)
        for node_index in range(1, cluster.node_count + 1):
            with self._error_state_on_failure(cluster, f"Provisioning node instance [{node_index}]"):
                self.instance_provisioner.provision_node(cluster, master_ip, node_index)
        self.logger.info("All instances of cluster [%s] are provisioned.", cluster)

        port = self.readiness_probe.port
        with self._error_state_on_failure(cluster, "Provisioning firewall rules"):
            self.logger.info("Opening port [%d] on [%s] for cluster [%s].", port, public_ip.address, cluster)
            self.firewall_service.create_ingress_rule(public_ip, PROTOCOL, port, port, INGRESS_CIDRS)
            self.firewall_service.apply_ingress_rules(public_ip, owner)

        with self._error_state_on_failure(cluster, "Provisioning port forwarding rules"):
            self.logger.info("Forwarding port [%d] on [%s] to master instance [%s] at [%s].", port, public_ip.address,
                             master.id, master_ip)
            self.rules_service.create_port_forwarding_rule(public_ip, port, port, master_ip, PROTOCOL, cluster.network_id,
                                                           owner, master.id)
            self.rules_service.apply_port_forwarding_rules(public_ip, owner)
        return public_ip

    def _restart_instances(self, cluster):
        for mapping in self.record_store.list_vm_mappings(cluster.id):
            with self._error_state_on_failure(cluster, f"Restarting instance [{mapping.vm_id}]"):
                self.instance_service.start_instance(mapping.vm_id)
                instance = self.instance_service.get_instance(mapping.vm_id)
                if instance is None or not instance.running:
                    raise exceptions.ProvisioningError(f"Instance [{mapping.vm_id}] is not running after it was started.")
        with self._error_state_on_failure(cluster, "Looking up the public IP address"):
            return self._public_ip(cluster)

    def _public_ip(self, cluster):
        public_ips = self.catalog.list_public_ips(cluster.network_id)
        if not public_ips:
            raise exceptions.InfraOperationError(f"No public IP address is associated with network [{cluster.network_id}].")
        return public_ips[0]

    def _await_readiness(self, cluster, public_ip):
        endpoint = f"https://{public_ip.address}/"
        with self._error_state_on_failure(cluster, "Probing the cluster endpoint"):
            try:
                attempts = self.waiter.wait(self.readiness_probe.is_reachable, public_ip.address)
            except exceptions.ReadinessTimeoutError as e:
                self.logger.error("Endpoint [%s] of cluster [%s] did not become reachable: %s", endpoint, cluster, e)
                attempts = None
            if attempts is not None:
                self.logger.info("Endpoint [%s] of cluster [%s] is reachable after [%d] attempt(s).", endpoint, cluster,
                                 attempts)
                cluster = self.record_store.transition(cluster.id, ClusterState.RUNNING, endpoint=endpoint)
        if attempts is None:
            return self.record_store.transition(cluster.id, ClusterState.ERROR)

        try:
            console_endpoint = self.dashboard_discovery.discover(public_ip.address)
            if console_endpoint:
                cluster = self.record_store.update_endpoints(cluster.id, console_endpoint=console_endpoint)
        except Exception as e:  # pylint: disable=broad-except
            self.logger.warning("Could not discover the dashboard of cluster [%s]: %s", cluster, e, exc_info=True)
        return cluster

    def _lookup(self, kind, entity_id, lookup):
        entity = lookup(entity_id)
        if entity is None:
            raise exceptions.NotFound(f"Unable to find {kind} with id [{entity_id}].")
        return entity

    @contextlib.contextmanager
    def _error_state_on_failure(self, cluster, step):
        try:
            yield
        except exceptions.CcsError as e:
            self.logger.error("%s failed for cluster [%s]: %s", step, cluster, e)
            self.record_store.transition(cluster.id, ClusterState.ERROR)
            raise
        except Exception as e:
            self.logger.exception("%s failed for cluster [%s].", step, cluster)
            self.record_store.transition(cluster.id, ClusterState.ERROR)
            raise exceptions.ProvisioningError(f"{step} failed for cluster [{cluster.name}]", e) from e
