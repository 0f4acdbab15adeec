# SPDX-License-Identifier: Apache-2.0
#
# The OpenSearch Contributors require contributions made to
# this file be licensed under the Apache-2.0 license or a
# compatible open source license.
# Modifications Copyright OpenSearch Contributors. See
# GitHub history for details.
# Licensed to Elasticsearch B.V. under one or more contributor
# license agreements. See the NOTICE file distributed with
# this work for additional information regarding copyright
# ownership. Elasticsearch B.V. licenses this file to you under
# the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#	http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.

"""
The ClusterService is the interface into the container cluster service from the request dispatcher. It wires the
collaborators into the orchestrators and exposes the cluster operations.
"""
import logging

from ccs import config, time
from ccs.orchestrators.instance_provisioner import InstanceProvisioner
from ccs.orchestrators.lifecycle_orchestrator import LifecycleOrchestrator
from ccs.orchestrators.provisioning_orchestrator import ProvisioningOrchestrator
from ccs.orchestrators.teardown_orchestrator import TeardownOrchestrator
from ccs.presentation.cluster_response import ClusterResponse
from ccs.services.access_checker import AccessType
from ccs.services.exception_handling_instance_service import ExceptionHandlingInstanceService
from ccs.services.exception_handling_network_service import ExceptionHandlingNetworkService
from ccs.services.exception_handling_rule_services import ExceptionHandlingFirewallService, ExceptionHandlingRulesService
from ccs.store.cluster_record_store import ClusterRecordStore
from ccs.utils.bootstrap_renderer import BootstrapRenderer
from ccs.utils.dashboard_discovery import DashboardDiscovery
from ccs.utils.periodic_waiter import PeriodicWaiter
from ccs.utils.readiness_probe import TcpReadinessProbe

DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_BACKOFF_SECONDS = 50
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10
DEFAULT_PORT = 443
DEFAULT_DASHBOARD_PATH = "/api/v1/proxy/namespaces/kube-system/services/kubernetes-dashboard"
DEFAULT_DASHBOARD_TIMEOUT_SECONDS = 10


def readiness_probe(cfg):
    return TcpReadinessProbe(port=config.int_setting(cfg, "readiness", "port", DEFAULT_PORT),
                             connect_timeout=config.float_setting(cfg, "readiness", "connect.timeout.seconds",
                                                                  DEFAULT_CONNECT_TIMEOUT_SECONDS))


def readiness_waiter(cfg, clock=time.Clock):
    return PeriodicWaiter(poll_interval=config.float_setting(cfg, "readiness", "backoff.seconds", DEFAULT_BACKOFF_SECONDS),
                          max_attempts=config.int_setting(cfg, "readiness", "max.attempts", DEFAULT_MAX_ATTEMPTS),
                          clock=clock)


def dashboard_discovery(cfg):
    return DashboardDiscovery(path=cfg.opts("dashboard", "path", default_value=DEFAULT_DASHBOARD_PATH, mandatory=False),
                              request_timeout=config.float_setting(cfg, "dashboard", "request.timeout.seconds",
                                                                   DEFAULT_DASHBOARD_TIMEOUT_SECONDS),
                              verify_certs=config.bool_setting(cfg, "dashboard", "verify.certs", False))


class ClusterService:
    def __init__(self, cfg, catalog, network_service, instance_service, firewall_service, rules_service, entity_store,
                 access_checker, clock=time.Clock):
        self.logger = logging.getLogger(__name__)
        self.catalog = catalog
        self.network_service = ExceptionHandlingNetworkService(network_service)
        self.instance_service = ExceptionHandlingInstanceService(instance_service)
        self.access_checker = access_checker
        self.record_store = ClusterRecordStore(entity_store, clock=clock)

        instance_provisioner = InstanceProvisioner(cfg, catalog, self.network_service, self.instance_service,
                                                   self.record_store, BootstrapRenderer())
        self.provisioning_orchestrator = ProvisioningOrchestrator(
            cfg, catalog, self.network_service, self.instance_service, ExceptionHandlingFirewallService(firewall_service),
            ExceptionHandlingRulesService(rules_service), self.record_store, instance_provisioner, readiness_probe(cfg),
            readiness_waiter(cfg, clock), dashboard_discovery(cfg), clock=clock)
        self.lifecycle_orchestrator = LifecycleOrchestrator(self.instance_service, self.record_store)
        self.teardown_orchestrator = TeardownOrchestrator(catalog, self.network_service, self.instance_service,
                                                          self.record_store, access_checker)

    def create_cluster(self, name, display_name, zone, service_offering, owner, node_count, network_id=None, ssh_key_pair=None):
        return self.provisioning_orchestrator.create_cluster(name, display_name, zone, service_offering, owner, node_count,
                                                             network_id=network_id, ssh_key_pair=ssh_key_pair)

    def start_cluster(self, cluster_id):
        return self.provisioning_orchestrator.start_cluster(cluster_id)

    def stop_cluster(self, cluster_id):
        return self.lifecycle_orchestrator.stop_cluster(cluster_id)

    def delete_cluster(self, cluster_id, caller):
        return self.teardown_orchestrator.delete_cluster(cluster_id, caller)

    def find_by_id(self, cluster_id):
        return self.record_store.find_cluster(cluster_id)

    def list_clusters(self, caller, cluster_id=None):
        """
        Lists the clusters visible to the caller. Never changes any record.

        :param caller: The Account issuing the request.
        :param cluster_id: If given, only the cluster with this id is listed.
        :return: A list of Cluster records.
        """
        if cluster_id is not None:
            cluster = self.record_store.find_cluster(cluster_id)
            self.access_checker.check_access(caller, cluster, AccessType.LIST)
            return [cluster]
        if self.access_checker.is_admin(caller):
            return self.record_store.list_clusters()
        return self.record_store.list_clusters(account_id=caller.id)

    def describe_clusters(self, caller, cluster_id=None):
        return [ClusterResponse.from_cluster(c, self.catalog, self.network_service, self.instance_service, self.record_store)
                for c in self.list_clusters(caller, cluster_id)]
