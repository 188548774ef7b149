"""Configuration management for hdfs-tools."""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Tool settings use the ``HDFS_TOOLS_`` prefix. The Hadoop variables keep
    the names the rest of the Hadoop ecosystem uses.
    """

    log_level: str = "ERROR"
    otel_enabled: bool = False
    otel_service_name: str = "hdfs-tools"
    request_timeout: float = 30.0

    namenode: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("HADOOP_NAMENODE")
    )
    conf_dir: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("HADOOP_CONF_DIR")
    )
    keytab: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("HADOOP_KEYTAB")
    )
    krb5_config: str = Field(
        default="/etc/krb5.conf", validation_alias=AliasChoices("HADOOP_KRB_CONF")
    )
    service_name: str = Field(
        default="HTTP", validation_alias=AliasChoices("HADOOP_SNAME")
    )
    user_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("HADOOP_USER_NAME")
    )

    model_config = {
        "env_prefix": "HDFS_TOOLS_",
        "case_sensitive": False,
        "populate_by_name": True,
    }


settings = Settings()
