"""
Network Address Helpers Module
host:port splitting and raw address normalization
"""


def split_host_port(hostport):
    """
    Split a network address of the form ``host:port``, ``[host]:port``
    into host and port

    The host must be bracketed when it contains a colon. The port is not
    checked to be numeric and may be empty.

    Args:
        hostport: Address string

    Returns:
        Tuple of (host, port), host without brackets

    Raises:
        ValueError: if the string is not a host:port pair

    Example:
        >>> split_host_port("192.0.2.1:80")
        ('192.0.2.1', '80')
        >>> split_host_port("[2001:db8::1]:443")
        ('2001:db8::1', '443')
    """
    i = hostport.rfind(':')
    if i < 0:
        raise ValueError(f"missing port in address: {hostport!r}")

    if hostport.startswith('['):
        end = hostport.find(']')
        if end < 0:
            raise ValueError(f"missing ']' in address: {hostport!r}")
        if end + 1 == len(hostport):
            raise ValueError(f"missing port in address: {hostport!r}")
        if end + 1 != i:
            if hostport[end + 1] == ':':
                raise ValueError(f"too many colons in address: {hostport!r}")
            raise ValueError(f"missing port in address: {hostport!r}")
        host = hostport[1:end]
        if '[' in hostport[1:]:
            raise ValueError(f"unexpected '[' in address: {hostport!r}")
        if ']' in hostport[end + 1:]:
            raise ValueError(f"unexpected ']' in address: {hostport!r}")
    else:
        host = hostport[:i]
        if ':' in host:
            raise ValueError(f"too many colons in address: {hostport!r}")
        if '[' in hostport or ']' in hostport:
            raise ValueError(f"unexpected bracket in address: {hostport!r}")

    return host, hostport[i + 1:]


def join_host_port(host, port):
    """Combine host and port, bracketing hosts that contain a colon"""
    if ':' in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def strip_port(value):
    """Remove a ``:port`` suffix (``a.b.c.d:port`` or ``[v6]:port``) if present"""
    value = value.strip()
    if value.startswith('[') and ']' in value:
        try:
            host, _ = split_host_port(value)
            return host.strip('[]')
        except ValueError:
            value = value.strip('[]')
    try:
        host, _ = split_host_port(value)
        return host
    except ValueError:
        return value


def _normalize_once(value):
    value = strip_port(value)
    zone = value.find('%')
    if zone != -1:
        value = value[:zone]
    if value.startswith('::ffff:'):
        value = value[len('::ffff:'):]
    return value.strip()


def normalize(raw):
    """
    Canonicalize a raw address token taken from a header or the peer address

    Strips surrounding whitespace, a port suffix, brackets, a ``%zone`` id
    and a literal ``::ffff:`` prefix. Each pass can only shorten the value,
    so passes repeat until it stops changing; this keeps the function
    idempotent for inputs such as ``::ffff:1.2.3.4:80``. Never raises:
    unparseable input comes back trimmed but otherwise unchanged.

    Example:
        >>> normalize(" 203.0.113.5:54321 ")
        '203.0.113.5'
        >>> normalize("[fe80::1%eth0]:8080")
        'fe80::1'
        >>> normalize("::ffff:203.0.113.5")
        '203.0.113.5'
    """
    if raw is None:
        return ""

    value = raw.strip()
    while True:
        cleaned = _normalize_once(value)
        if cleaned == value:
            return cleaned
        value = cleaned
