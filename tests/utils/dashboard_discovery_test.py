from unittest import TestCase
from unittest.mock import Mock

import urllib3

from ccs.utils import dashboard_discovery
from ccs.utils.dashboard_discovery import DashboardDiscovery

DASHBOARD_PATH = "/api/v1/proxy/namespaces/kube-system/services/kubernetes-dashboard"

SERVICE_BODY = """{
  "kind": "Service",
  "spec": {
    "ports": [
      {
        "protocol": "TCP",
        "port": 80,
        "targetPort": 9090,
        "nodePort": 31876
      }
    ]
  }
}"""


class ParseNodePortTests(TestCase):
    def test_finds_node_port(self):
        self.assertEqual(31876, dashboard_discovery.parse_node_port(SERVICE_BODY))

    def test_no_node_port(self):
        self.assertIsNone(dashboard_discovery.parse_node_port('{"kind": "Service"}'))
        self.assertIsNone(dashboard_discovery.parse_node_port(""))


class DashboardDiscoveryTests(TestCase):
    def setUp(self):
        self.http = Mock()
        self.discovery = DashboardDiscovery(DASHBOARD_PATH, request_timeout=10, http=self.http)

    def test_discovers_dashboard(self):
        self.http.request.return_value = Mock(status=200, data=SERVICE_BODY.encode("utf-8"))

        url = self.discovery.discover("192.0.2.1")

        self.assertEqual(f"https://192.0.2.1{DASHBOARD_PATH}", url)
        self.http.request.assert_called_once_with("GET", f"https://192.0.2.1{DASHBOARD_PATH}", timeout=10, retries=False)

    def test_no_node_port_published(self):
        self.http.request.return_value = Mock(status=200, data=b'{"kind": "Service"}')

        self.assertIsNone(self.discovery.discover("192.0.2.1"))

    def test_error_status(self):
        self.http.request.return_value = Mock(status=503, data=b"")

        self.assertIsNone(self.discovery.discover("192.0.2.1"))

    def test_connection_failure(self):
        self.http.request.side_effect = urllib3.exceptions.HTTPError("connection reset")

        self.assertIsNone(self.discovery.discover("192.0.2.1"))

    def test_pool_manager_verifies_certificates_if_configured(self):
        discovery = DashboardDiscovery(DASHBOARD_PATH, request_timeout=10, verify_certs=True)

        self.assertEqual("CERT_REQUIRED", discovery.http.connection_pool_kw["cert_reqs"])
        self.assertIn("ca_certs", discovery.http.connection_pool_kw)

    def test_pool_manager_skips_verification_by_default(self):
        discovery = DashboardDiscovery(DASHBOARD_PATH, request_timeout=10)

        self.assertEqual("CERT_NONE", discovery.http.connection_pool_kw["cert_reqs"])
