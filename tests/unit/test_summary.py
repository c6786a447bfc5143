from datetime import datetime

from idsort.extraction.models import IdentityRecord
from idsort.grouping.summary import render_summary


class TestRenderSummary:
    def test_renders_fixed_layout(self) -> None:
        identity = IdentityRecord(
            first_name="JOHN",
            last_name="SMITH",
            date_of_birth="01/02/1990",
            document_number="D1234567",
            raw_text="SMITH, JOHN DOB 01/02/1990",
        )

        text = render_summary(identity, datetime(2024, 1, 2, 3, 4, 5))

        lines = text.splitlines()
        assert lines[0] == "Driver License Information"
        assert "Full Name: JOHN SMITH" in lines
        assert "First Name: JOHN" in lines
        assert "Last Name: SMITH" in lines
        assert "License Number: D1234567" in lines
        assert "Issued Date: " in lines
        assert "Raw OCR Text:" in lines
        assert lines[-1] == "Generated on: 2024-01-02 03:04:05"
