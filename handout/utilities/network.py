"""Network helpers used when announcing where the handout app is reachable."""
import socket


def get_local_ip(probe_host: str = "8.8.8.8", probe_port: int = 80) -> str:
    """Return the LAN address the OS would route from, or '127.0.0.1'.

    Connecting a UDP socket only selects a source interface; nothing is sent.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect((probe_host, probe_port))
            return str(sock.getsockname()[0])
    except OSError:
        return "127.0.0.1"


def describe_urls(host: str, port: int) -> list[str]:
    """URLs to print at startup: localhost first, then the LAN address if any."""
    urls = [f"http://localhost:{port}"]
    if host in ("0.0.0.0", ""):
        local_ip = get_local_ip()
        if local_ip not in ("127.0.0.1", "localhost"):
            urls.append(f"http://{local_ip}:{port}")
    return urls
