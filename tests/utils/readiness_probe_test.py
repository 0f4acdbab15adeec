from unittest import TestCase, mock

from ccs.utils.readiness_probe import TcpReadinessProbe


class TcpReadinessProbeTests(TestCase):
    def setUp(self):
        self.probe = TcpReadinessProbe(port=443, connect_timeout=10)

    @mock.patch("socket.create_connection")
    def test_reachable(self, create_connection):
        self.assertTrue(self.probe.is_reachable("192.0.2.1"))

        create_connection.assert_called_once_with(("192.0.2.1", 443), timeout=10)
        # the connection is closed right away
        create_connection.return_value.__exit__.assert_called_once()

    @mock.patch("socket.create_connection")
    def test_connection_refused(self, create_connection):
        create_connection.side_effect = ConnectionRefusedError("refused")

        self.assertFalse(self.probe.is_reachable("192.0.2.1"))

    @mock.patch("socket.create_connection")
    def test_connect_timeout(self, create_connection):
        create_connection.side_effect = TimeoutError("timed out")

        self.assertFalse(self.probe.is_reachable("192.0.2.1"))
