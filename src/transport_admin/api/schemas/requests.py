"""Request DTOs (transport, ICT, store) — pure Pydantic."""
from __future__ import annotations
from enum import Enum
from pydantic import AliasChoices, Field, field_validator
from transport_admin.api.schemas._base import BackendModel, optional_float, ref_from_id


class RequestType(str, Enum):
    VEHICLE = "vehicle"
    ICT = "ict"
    STORE = "store"


class VehicleRequestStatus(str, Enum):
    PENDING = "pending"
    SUPERVISOR_APPROVED = "supervisor_approved"
    DGS_APPROVED = "dgs_approved"
    DDGS_APPROVED = "ddgs_approved"
    AD_TRANSPORT_APPROVED = "ad_transport_approved"
    TRANSPORT_OFFICER_ASSIGNED = "transport_officer_assigned"
    DRIVER_ACCEPTED = "driver_accepted"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    RETURNED = "returned"
    REJECTED = "rejected"
    NEEDS_CORRECTION = "needs_correction"
    CANCELLED = "cancelled"


class IctRequestStatus(str, Enum):
    PENDING = "ict_pending"
    SUPERVISOR_APPROVED = "ict_supervisor_approved"
    ICT_OFFICER_APPROVED = "ict_ict_officer_approved"
    APPROVED = "ict_approved"
    REJECTED = "ict_rejected"
    NEEDS_CORRECTION = "ict_needs_correction"
    CANCELLED = "ict_cancelled"
    FULFILLED = "ict_fulfilled"


class StoreRequestStatus(str, Enum):
    PENDING = "store_pending"
    SUPERVISOR_APPROVED = "store_supervisor_approved"
    STORE_OFFICER_APPROVED = "store_officer_approved"
    APPROVED = "store_approved"
    REJECTED = "store_rejected"
    NEEDS_CORRECTION = "store_needs_correction"
    CANCELLED = "store_cancelled"
    FULFILLED = "store_fulfilled"


ICT_STATUS_LABELS: dict[str, str] = {
    IctRequestStatus.PENDING.value: "Pending",
    IctRequestStatus.SUPERVISOR_APPROVED.value: "Supervisor Approved",
    IctRequestStatus.ICT_OFFICER_APPROVED.value: "ICT Officer Approved",
    IctRequestStatus.APPROVED.value: "Approved",
    IctRequestStatus.REJECTED.value: "Rejected",
    IctRequestStatus.NEEDS_CORRECTION.value: "Needs Correction",
    IctRequestStatus.CANCELLED.value: "Cancelled",
    IctRequestStatus.FULFILLED.value: "Fulfilled",
}

STORE_STATUS_LABELS: dict[str, str] = {
    StoreRequestStatus.PENDING.value: "Pending",
    StoreRequestStatus.SUPERVISOR_APPROVED.value: "Supervisor Approved",
    StoreRequestStatus.STORE_OFFICER_APPROVED.value: "Store Officer Approved",
    StoreRequestStatus.APPROVED.value: "Approved",
    StoreRequestStatus.REJECTED.value: "Rejected",
    StoreRequestStatus.NEEDS_CORRECTION.value: "Needs Correction",
    StoreRequestStatus.CANCELLED.value: "Cancelled",
    StoreRequestStatus.FULFILLED.value: "Fulfilled",
}


class PersonRef(BackendModel):
    id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    department: str | None = None


class VehicleRef(BackendModel):
    id: str | None = Field(default=None, alias="_id")
    plate_number: str | None = None
    make: str | None = None
    model: str | None = None
    capacity: int | None = None


class TripMetrics(BackendModel):
    distance_km: float | None = None
    duration_minutes: float | None = None
    average_speed_kph: float | None = None

    @field_validator("distance_km", "duration_minutes", "average_speed_kph", mode="before")
    @classmethod
    def _numeric_or_none(cls, v):
        return optional_float(v)


class ApprovalEvent(BackendModel):
    approver_id: PersonRef | None = None
    status: str | None = None
    timestamp: str | None = None
    comments: str | None = None

    @field_validator("approver_id", mode="before")
    @classmethod
    def _normalise_ref(cls, v):
        return ref_from_id(v)


class RequestDetail(BackendModel):
    id: str | None = Field(default=None, alias="_id")
    status: str = ""
    destination: str | None = None
    purpose: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    passenger_count: int | None = None
    # The backend populates the requester under `requesterId`.
    requester: PersonRef | None = Field(
        default=None, validation_alias=AliasChoices("requester", "requesterId"),
    )
    assigned_driver: PersonRef | None = Field(default=None, alias="assignedDriverId")
    assigned_vehicle: VehicleRef | None = Field(default=None, alias="assignedVehicleId")
    trip_metrics: TripMetrics | None = None
    approval_chain: list[ApprovalEvent] = Field(default_factory=list)

    @field_validator("requester", "assigned_driver", "assigned_vehicle", mode="before")
    @classmethod
    def _normalise_ref(cls, v):
        return ref_from_id(v)

    @field_validator("approval_chain", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return v or []


class RequestSummary(BackendModel):
    """One row of a request list; fields cover all three request types."""

    id: str | None = Field(default=None, alias="_id")
    request_type: str | None = None
    status: str = ""
    requester: PersonRef | None = Field(default=None, alias="requesterId")
    destination: str | None = None
    purpose: str | None = None
    equipment_type: str | None = None
    specifications: str | None = None
    item_name: str | None = None
    quantity: int | None = None
    unit: str | None = None
    urgency: str | None = None
    start_date: str | None = None
    created_at: str | None = None

    @field_validator("requester", mode="before")
    @classmethod
    def _normalise_ref(cls, v):
        return ref_from_id(v)
