import logging
import re

import certifi
import urllib3

NODE_PORT_PATTERN = re.compile(r'"?nodePort"?\s*:\s*(\d+)')


def parse_node_port(body):
    """
    :param body: The body of the dashboard service description.
    :return: The published node port of the service or ``None`` if the body does not contain one.
    """
    for line in body.splitlines():
        if "nodePort" in line:
            match = NODE_PORT_PATTERN.search(line)
            if match:
                return int(match.group(1))
    return None


class DashboardDiscovery:
    """
    Looks up the dashboard service of a freshly started cluster through the API server proxy. Discovery is best effort:
    every failure is logged and reported as "not found".
    """
    def __init__(self, path, request_timeout, verify_certs=False, http=None):
        self.logger = logging.getLogger(__name__)
        self.path = path
        self.request_timeout = request_timeout
        self.http = http if http is not None else self._create_pool_manager(verify_certs)

    def _create_pool_manager(self, verify_certs):
        if verify_certs:
            self.logger.info("SSL certificate verification for dashboard discovery: on")
            return urllib3.PoolManager(cert_reqs="CERT_REQUIRED", ca_certs=certifi.where())
        self.logger.info("SSL certificate verification for dashboard discovery: off")
        # clusters serve a self-signed certificate until an operator replaces it
        urllib3.disable_warnings()
        return urllib3.PoolManager(cert_reqs="CERT_NONE")

    def dashboard_url(self, public_address):
        return f"https://{public_address}{self.path}"

    def discover(self, public_address):
        """
        :param public_address: The public IP address of the cluster.
        :return: The dashboard URL if the dashboard service publishes a node port, ``None`` otherwise.
        """
        url = self.dashboard_url(public_address)
        try:
            response = self.http.request("GET", url, timeout=self.request_timeout, retries=False)
        except (urllib3.exceptions.HTTPError, OSError) as e:
            self.logger.warning("Could not query the dashboard service at [%s]: %s", url, e)
            return None
        if response.status != 200:
            self.logger.warning("Querying the dashboard service at [%s] returned HTTP status [%s].", url, response.status)
            return None
        node_port = parse_node_port(response.data.decode("utf-8", errors="replace"))
        if node_port is None:
            self.logger.warning("The dashboard service at [%s] does not publish a node port.", url)
            return None
        self.logger.info("Dashboard service is running on node port [%d].", node_port)
        return url
