from typing import Literal

from pydantic import BaseModel, Field


class ServiceAccountKey(BaseModel):
    """
    Model for a GCP Service Account JSON key as downloaded from the console.
    """

    type: Literal["service_account"]
    project_id: str = Field(min_length=1)
    private_key_id: str = Field(min_length=1)
    private_key: str = Field(min_length=1)
    client_email: str = Field(min_length=1)
    client_id: str = ""
    token_uri: str = Field(min_length=1)
    auth_uri: str = "https://accounts.google.com/o/oauth2/auth"
    auth_provider_x509_cert_url: str = ""
    client_x509_cert_url: str = ""
    universe_domain: str = Field(
        default="googleapis.com", description="Typically 'googleapis.com'"
    )
