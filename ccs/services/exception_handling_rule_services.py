from ccs.exceptions import CcsError, InfraOperationError
from ccs.services.firewall_service import FirewallService
from ccs.services.rules_service import RulesService


class ExceptionHandlingFirewallService(FirewallService):
    def __init__(self, firewall_service):
        self.firewall_service = firewall_service

    def create_ingress_rule(self, public_ip, protocol, start_port, end_port, cidrs):
        try:
            return self.firewall_service.create_ingress_rule(public_ip, protocol, start_port, end_port, cidrs)
        except CcsError:
            raise
        except Exception as e:
            raise InfraOperationError(f"Creating ingress rule for port(s) {start_port}-{end_port} on \"{public_ip.address}\" failed", e)

    def apply_ingress_rules(self, public_ip, account):
        try:
            return self.firewall_service.apply_ingress_rules(public_ip, account)
        except CcsError:
            raise
        except Exception as e:
            raise InfraOperationError(f"Applying ingress rules on \"{public_ip.address}\" failed", e)


class ExceptionHandlingRulesService(RulesService):
    def __init__(self, rules_service):
        self.rules_service = rules_service

    def create_port_forwarding_rule(self, public_ip, public_port, private_port, private_ip, protocol, network_id, owner, instance_id):
        try:
            return self.rules_service.create_port_forwarding_rule(public_ip, public_port, private_port, private_ip, protocol,
                                                                  network_id, owner, instance_id)
        except CcsError:
            raise
        except Exception as e:
            raise InfraOperationError(f"Creating port forwarding rule from \"{public_ip.address}:{public_port}\" to "
                                      f"\"{private_ip}:{private_port}\" failed", e)

    def apply_port_forwarding_rules(self, public_ip, account):
        try:
            return self.rules_service.apply_port_forwarding_rules(public_ip, account)
        except CcsError:
            raise
        except Exception as e:
            raise InfraOperationError(f"Applying port forwarding rules on \"{public_ip.address}\" failed", e)
