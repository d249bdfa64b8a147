from datetime import datetime, tzinfo
from typing import Optional
from uuid import UUID
from app.services.email_service import EmailMessage
from app.utils.dates import format_long_date

_EMAIL_BODY = """
<div style="font-family: sans-serif; font-size: 16px; line-height: 1.6;">
  <p>{intro}</p>
  <p></p>
  <p>{call_to_action}</p>
  <p></p>
  <p>
    <a href="{link}">Confirm trip</a>
  </p>
  <p></p>
  <p>If you don't know what this email is about, just ignore it.</p>
</div>
""".strip()


def generate_trip_confirmation_link(api_base_url: str, trip_id: UUID) -> str:
    return f"{api_base_url}/trips/{trip_id}/confirm"


def generate_participant_confirmation_link(api_base_url: str, participant_id: UUID) -> str:
    return f"{api_base_url}/participants/{participant_id}/confirm"


def build_trip_confirmation_email(
    *,
    owner_email: str,
    owner_name: Optional[str],
    destination: str,
    starts_at: datetime,
    ends_at: datetime,
    confirmation_link: str,
    tz: tzinfo,
) -> EmailMessage:
    """Mail asking the owner to confirm the trip they just created."""
    start = format_long_date(starts_at, tz)
    end = format_long_date(ends_at, tz)
    html = _EMAIL_BODY.format(
        intro=(
            f"You asked to create a trip to <strong>{destination}</strong> "
            f"from <strong>{start}</strong> to <strong>{end}</strong>."
        ),
        call_to_action="To confirm your trip, click the link below:",
        link=confirmation_link,
    )
    return EmailMessage(
        to_email=owner_email,
        to_name=owner_name or None,
        subject=f"Confirm your trip to {destination} on {start}",
        html=html,
    )


def build_participant_invite_email(
    *,
    participant_email: str,
    participant_name: Optional[str],
    destination: str,
    starts_at: datetime,
    ends_at: datetime,
    confirmation_link: str,
    tz: tzinfo,
) -> EmailMessage:
    """Mail inviting a participant to confirm their presence on a trip."""
    start = format_long_date(starts_at, tz)
    end = format_long_date(ends_at, tz)
    html = _EMAIL_BODY.format(
        intro=(
            f"You have been invited to join a trip to <strong>{destination}</strong> "
            f"from <strong>{start}</strong> to <strong>{end}</strong>."
        ),
        call_to_action="To confirm your presence on the trip, click the link below:",
        link=confirmation_link,
    )
    return EmailMessage(
        to_email=participant_email,
        to_name=participant_name or None,
        subject=f"Confirm your presence on the trip to {destination} on {start}",
        html=html,
    )
