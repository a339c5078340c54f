"""Punycode transcoding of domain names, one label at a time.

Both directions are best-effort: a label that cannot be transcoded is passed
through unchanged, and dots are never altered.
"""

from .decompose import decompose

ACE_PREFIX = "xn--"


def _decode_label(label: str) -> str:
    if label[:len(ACE_PREFIX)].lower() != ACE_PREFIX:
        return label
    try:
        decoded = label[len(ACE_PREFIX):].encode("ascii").decode("punycode")
    except UnicodeError:
        return label
    return decoded or label


def _is_identity_encoding(encoded: str, label: str) -> bool:
    # Pure ASCII labels only gain a trailing "-" delimiter.
    return (
        encoded.endswith("-")
        and len(encoded) == len(label) + 1
        and encoded.startswith(label)
    )


def _encode_label(label: str) -> str:
    encoded = label.encode("punycode").decode("ascii")
    if not encoded or _is_identity_encoding(encoded, label):
        return label
    return ACE_PREFIX + encoded


def decode_host(host: str) -> str:
    """Convert ACE ("xn--") labels of host to Unicode.

    Example:
        >>> decode_host("xn--bcher-kva.example")
        'bücher.example'
        >>> decode_host("xn--!!.example")
        'xn--!!.example'
    """
    return ".".join(_decode_label(label) for label in host.split("."))


def encode_host(host: str) -> str:
    """Convert non-ASCII labels of host to their ACE form.

    ASCII labels are left exactly as they are.

    Example:
        >>> encode_host("bücher.example")
        'xn--bcher-kva.example'
    """
    return ".".join(_encode_label(label) for label in host.split("."))


def encode_url_host(url: str) -> str:
    """Rewrite the host of an absolute URL to ACE form, leaving the rest alone.

    Example:
        >>> encode_url_host("gemini://bücher.example/ä")
        'gemini://xn--bcher-kva.example/ä'
    """
    view = decompose(url)
    if view.host.is_empty:
        return url
    return view.splice(view.host, encode_host(view.host_text))
