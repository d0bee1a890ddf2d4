"""Pydantic model for the persisted API key and default city."""

from pydantic import BaseModel


class Credentials(BaseModel):
    """API key and default city, as stored in the two-line config file."""

    api_key: str
    city: str

    @classmethod
    def from_text(cls, text: str) -> "Credentials":
        """Parse config file contents; missing lines become empty strings."""
        lines = text.splitlines()
        api_key = lines[0] if len(lines) > 0 else ""
        city = lines[1] if len(lines) > 1 else ""
        return cls(api_key=api_key, city=city)

    def to_text(self) -> str:
        """Serialize as two newline-joined lines (no trailing newline)."""
        return f"{self.api_key}\n{self.city}"
