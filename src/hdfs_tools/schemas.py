"""Record and configuration schemas for hdfs-tools."""

from datetime import datetime
from typing import Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class EntryRecord(BaseModel):
    """Normalized view of one HDFS entry.

    Every record carries the full long-listing metadata, whether it came
    from a direct status probe or from a directory page.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Leaf name of the entry")
    is_directory: bool = Field(..., description="True for directories")
    permission_mode: str = Field(..., description="ls-style mode, e.g. drwxr-xr-x")
    owner: str = Field(..., description="Owning user")
    group: str = Field(..., description="Owning group")
    size_bytes: int = Field(..., ge=0, description="Length in bytes")
    modified_at: AwareDatetime = Field(..., description="Modification time")

    def renamed(self, name: str) -> "EntryRecord":
        """Return a copy of this record under another name."""
        return self.model_copy(update={"name": name})


class ListingOptions(BaseModel):
    """Flags selected for one listing invocation."""

    model_config = ConfigDict(frozen=True)

    long: bool = False
    show_all: bool = False
    human_readable: bool = False
    json_output: bool = False


class HdfsConnectionConfig(BaseModel):
    """Connection parameters for a WebHDFS namenode (or HA pair)."""
    addresses: list[str] = Field(..., min_length=1, description="host:port list")
    user: Optional[str] = Field(default=None, description="Pseudo-auth user name")
    keytab_path: Optional[str] = Field(default=None, description="Kerberos keytab")
    krb5_config_path: str = Field(
        default="/etc/krb5.conf", description="Kerberos configuration file"
    )
    service_name: str = Field(default="HTTP", description="SPNEGO service name")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout")


def from_epoch_millis(millis: int) -> datetime:
    """Convert a WebHDFS millisecond timestamp to an aware datetime in local time."""
    return datetime.fromtimestamp(millis / 1000).astimezone()
