"""Model for the categories of personal data exposed by an incident."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class BreachCategories(BaseModel):
    """Breach flags as declared in the ``breach`` section of the config file.

    Field order is significant: reportable categories are listed on the notice
    page in this order.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    defaced_malware: StrictBool = Field(default=False, description="Site was defaced or served malware (not listed)")
    address: StrictBool = Field(default=False, description="Postal address exposed")
    name: StrictBool = Field(default=False, description="Personal name exposed")
    gender: StrictBool = Field(default=False, description="Gender exposed")
    birthday: StrictBool = Field(default=False, description="Date of birth exposed")
    tel: StrictBool = Field(default=False, description="Phone number exposed")
    card: StrictBool = Field(default=False, description="Payment card number exposed")
    securitycode: StrictBool = Field(default=False, description="Card security code exposed")
    token: StrictBool = Field(default=False, description="Access token exposed")
