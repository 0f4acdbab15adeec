import logging
import socket


class TcpReadinessProbe:
    """
    Checks whether a TCP port accepts connections. A successful connect is closed again immediately.
    """
    def __init__(self, port, connect_timeout):
        self.logger = logging.getLogger(__name__)
        self.port = port
        self.connect_timeout = connect_timeout

    def is_reachable(self, address):
        self.logger.debug("Opening socket to [%s:%d].", address, self.port)
        try:
            with socket.create_connection((address, self.port), timeout=self.connect_timeout):
                self.logger.debug("[%s:%d] is reachable.", address, self.port)
                return True
        except OSError as e:
            self.logger.debug("[%s:%d] is not reachable: %s", address, self.port, e)
            return False
