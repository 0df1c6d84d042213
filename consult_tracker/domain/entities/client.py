"""Domain entity — a consultancy client (customer company)."""

from dataclasses import dataclass


@dataclass
class Client:
    """A customer company and its primary contact."""

    id: str
    company_name: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    notes: str = ""
    created_at: str = ""
    updated_at: str = ""
