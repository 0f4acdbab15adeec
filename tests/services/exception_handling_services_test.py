from unittest import TestCase
from unittest.mock import Mock

from ccs import exceptions
from ccs.models.infrastructure import PublicIpAddress
from ccs.services.exception_handling_instance_service import ExceptionHandlingInstanceService
from ccs.services.exception_handling_network_service import ExceptionHandlingNetworkService
from ccs.services.exception_handling_rule_services import ExceptionHandlingFirewallService, ExceptionHandlingRulesService

PUBLIC_IP = PublicIpAddress(id="ip-1", address="203.0.113.10", network_id="net-1")


class ExceptionHandlingInstanceServiceTests(TestCase):
    def setUp(self):
        self.instance_service = Mock()
        self.service = ExceptionHandlingInstanceService(self.instance_service)

    def test_delegates(self):
        self.instance_service.get_instance.return_value = "instance"

        self.assertEqual("instance", self.service.get_instance("vm-1"))
        self.instance_service.get_instance.assert_called_once_with("vm-1")

    def test_typed_errors_pass_through(self):
        error = exceptions.CapacityError("no capacity left in zone")
        self.instance_service.start_instance.side_effect = error

        with self.assertRaises(exceptions.CapacityError) as ctx:
            self.service.start_instance("vm-1")
        self.assertIs(error, ctx.exception)

    def test_other_errors_become_provisioning_errors(self):
        cause = RuntimeError("hypervisor unreachable")
        self.instance_service.create_instance.side_effect = cause

        with self.assertRaisesRegex(exceptions.ProvisioningError, r'Creating instance "demo-k8s-master" failed') as ctx:
            self.service.create_instance("zone", "offering", "template", "network", "owner", "demo-k8s-master", "Demo",
                                         "dXNlcmRhdGE=", None)
        self.assertIs(cause, ctx.exception.cause)


class ExceptionHandlingNetworkServiceTests(TestCase):
    def test_other_errors_become_infra_operation_errors(self):
        network_service = Mock()
        network_service.destroy_network.side_effect = RuntimeError("network is in use")
        service = ExceptionHandlingNetworkService(network_service)

        with self.assertRaisesRegex(exceptions.InfraOperationError, r'Destroying network "net-1" failed'):
            service.destroy_network("net-1", "owner")

    def test_typed_errors_pass_through(self):
        network_service = Mock()
        network_service.start_network.side_effect = exceptions.ResourceUnavailableError("no free VLAN")
        service = ExceptionHandlingNetworkService(network_service)

        with self.assertRaises(exceptions.ResourceUnavailableError):
            service.start_network("net-1", "zone", "owner")


class ExceptionHandlingRuleServicesTests(TestCase):
    def test_firewall_errors_become_infra_operation_errors(self):
        firewall_service = Mock()
        firewall_service.apply_ingress_rules.side_effect = RuntimeError("router down")
        service = ExceptionHandlingFirewallService(firewall_service)

        with self.assertRaises(exceptions.InfraOperationError):
            service.apply_ingress_rules(PUBLIC_IP, "owner")

    def test_port_forwarding_delegates(self):
        rules_service = Mock()
        service = ExceptionHandlingRulesService(rules_service)

        service.create_port_forwarding_rule(PUBLIC_IP, 443, 443, "10.1.1.1", "tcp", "net-1", "owner", "vm-1")

        rules_service.create_port_forwarding_rule.assert_called_once_with(PUBLIC_IP, 443, 443, "10.1.1.1", "tcp", "net-1",
                                                                          "owner", "vm-1")
