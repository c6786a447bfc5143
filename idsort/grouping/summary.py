from datetime import datetime

from idsort.extraction.models import IdentityRecord

_TEMPLATE = """Driver License Information
========================

Full Name: {full_name}
First Name: {first_name}
Last Name: {last_name}
Date of Birth: {date_of_birth}
License Number: {document_number}
Issued Date: {issue_date}
Expiration Date: {expiration_date}
Address: {address}

Raw OCR Text:
{raw_text}

Generated on: {generated_at}
"""


def render_summary(identity: IdentityRecord, generated_at: datetime) -> str:
    """Render the fixed-layout text report stored alongside a cluster's images."""
    return _TEMPLATE.format(
        full_name=identity.full_name,
        first_name=identity.first_name,
        last_name=identity.last_name,
        date_of_birth=identity.date_of_birth,
        document_number=identity.document_number,
        issue_date=identity.issue_date,
        expiration_date=identity.expiration_date,
        address=identity.address,
        raw_text=identity.raw_text,
        generated_at=generated_at.strftime("%Y-%m-%d %H:%M:%S"),
    )
