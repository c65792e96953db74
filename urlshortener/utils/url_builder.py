from pydantic import AnyUrl, TypeAdapter, ValidationError

_url_adapter = TypeAdapter(AnyUrl)


def build_short_url(scheme: str, host: str, short_code: str) -> str:
    """Public short URL for a code, from the inbound request's scheme and host."""
    return f"{scheme}://{host}/{short_code}"


def is_absolute_url(value: str) -> bool:
    """True when the value parses as a URL with both a scheme and a host."""
    try:
        parsed = _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return bool(parsed.scheme and parsed.host)
