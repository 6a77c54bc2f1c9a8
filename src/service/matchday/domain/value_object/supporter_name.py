from typing import Optional

import attrs


@attrs.frozen
class SupporterName:
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def parse(cls, full_name: Optional[str]) -> 'SupporterName':
        """First token is the first name, the remaining tokens form the last name."""
        parts = (full_name or '').split()
        if not parts:
            return cls()
        return cls(first_name=parts[0], last_name=' '.join(parts[1:]) or None)
