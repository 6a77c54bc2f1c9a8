import attrs


@attrs.frozen
class SessionUser:
    username: str
    name: str
    role: str
