"""Pydantic DTOs for suppliers, customers and subcontractors."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from construction_portal.application.schemas.common import ApiPayload

PartyStatus = Literal["active", "inactive", "blacklisted", "pending_approval"]

SupplierType = Literal["manufacturer", "distributor", "retailer", "contractor", "service_provider"]
SupplierCategory = Literal[
    "building_materials",
    "electrical_supplies",
    "plumbing_supplies",
    "tools_equipment",
    "safety_equipment",
    "paint_chemicals",
    "hardware",
    "services",
    "other",
]
CustomerType = Literal["individual", "company", "government", "non_profit"]
ContractType = Literal[
    "Electrical",
    "Plumbing",
    "Carpentry",
    "Masonry",
    "Painting",
    "Steelwork",
    "Roofing",
    "Landscaping",
]


class PostalAddress(ApiPayload):
    street: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)


class PrimaryContact(ApiPayload):
    name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=254)
    phone: str | None = Field(None, max_length=20)


class ContactInfo(ApiPayload):
    primary_contact: PrimaryContact = Field(default_factory=PrimaryContact)


# ── Suppliers ────────────────────────────────────────────────────────


class SupplierCreate(ApiPayload):
    name: str = Field(..., min_length=1, max_length=100)
    category: SupplierCategory
    company_name: str = Field("", max_length=100)
    type: SupplierType = "distributor"
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    address: PostalAddress = Field(default_factory=PostalAddress)
    status: PartyStatus = "active"


class SupplierUpdate(ApiPayload):
    name: str | None = Field(None, min_length=1, max_length=100)
    category: SupplierCategory | None = None
    company_name: str | None = Field(None, max_length=100)
    type: SupplierType | None = None
    contact_info: ContactInfo | None = None
    address: PostalAddress | None = None
    status: PartyStatus | None = None


class SupplierResponse(BaseModel):
    id: str
    name: str
    category: str
    company_name: str
    supplier_code: str | None
    type: str
    email: str | None
    phone: str | None
    city: str | None
    status: str
    rating: float | None

    model_config = {"from_attributes": True}


# ── Customers ────────────────────────────────────────────────────────


class CustomerCreate(ApiPayload):
    name: str = Field(..., min_length=1, max_length=100)
    nic: str = Field(..., min_length=1, max_length=12)
    phone: str | None = Field(None, max_length=20)
    company_name: str = Field("", max_length=100)
    type: CustomerType = "individual"
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    address: PostalAddress = Field(default_factory=PostalAddress)
    status: PartyStatus = "active"


class CustomerUpdate(ApiPayload):
    name: str | None = Field(None, min_length=1, max_length=100)
    nic: str | None = Field(None, min_length=1, max_length=12)
    phone: str | None = Field(None, max_length=20)
    company_name: str | None = Field(None, max_length=100)
    type: CustomerType | None = None
    contact_info: ContactInfo | None = None
    address: PostalAddress | None = None
    status: PartyStatus | None = None


class CustomerResponse(BaseModel):
    id: str
    name: str
    nic: str | None
    phone: str | None
    email: str | None
    company_name: str
    customer_code: str | None
    type: str
    street: str | None
    city: str | None
    state: str | None
    status: str

    model_config = {"from_attributes": True}


# ── Subcontractors ───────────────────────────────────────────────────


class SubcontractorCreate(ApiPayload):
    name: str = Field(..., min_length=1, max_length=100)
    nic: str = Field(..., min_length=1, max_length=12)
    email: str = Field(..., min_length=3, max_length=254)
    phone: str = Field(..., min_length=1, max_length=20)
    contract_type: ContractType
    address: str = Field(..., min_length=1, max_length=300)
    status: Literal["active", "inactive", "suspended"] = "active"


class SubcontractorUpdate(ApiPayload):
    name: str | None = Field(None, min_length=1, max_length=100)
    nic: str | None = Field(None, min_length=1, max_length=12)
    email: str | None = Field(None, min_length=3, max_length=254)
    phone: str | None = Field(None, min_length=1, max_length=20)
    contract_type: ContractType | None = None
    address: str | None = Field(None, min_length=1, max_length=300)
    status: Literal["active", "inactive", "suspended"] | None = None


class AppointmentCreate(ApiPayload):
    """Appoint a subcontractor to a site for a cost and a period."""

    project: str = Field(..., min_length=1)
    start_date: datetime
    end_date: datetime
    cost: float = Field(..., ge=0)

    @model_validator(mode="after")
    def _end_after_start(self) -> "AppointmentCreate":
        if self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self


class AppointmentResponse(BaseModel):
    project_id: str | None
    cost: float
    start_date: datetime | None
    end_date: datetime | None
    appointed_at: datetime | None

    model_config = {"from_attributes": True}


class SubcontractorResponse(BaseModel):
    id: str
    name: str
    nic: str
    email: str
    phone: str
    contract_type: str
    address: str
    contract_id: str | None
    status: str
    appointments: list[AppointmentResponse] = []

    model_config = {"from_attributes": True}
