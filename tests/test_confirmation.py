"""
Concurrency tests for the one-way confirmation of trips and participants.

Two sessions stand in for two simultaneous requests: the second one must see
that the flag was already flipped and neither update again nor send mail.
"""
import asyncio

from app.core.database import create_engine_from_url, create_session_factory
from app.core.init_db import init_db
from app.repositories import participants as participant_repo
from app.repositories import trips as trip_repo
from app.services.trips.participant_service import ParticipantService
from app.services.trips.trip_service import TripService
from tests.conftest import WEB_BASE_URL, future_day


async def _setup(settings):
    engine = create_engine_from_url(settings.DATABASE_URL)
    await init_db(engine)
    session_factory = create_session_factory(engine)
    async with session_factory() as db:
        trip = await trip_repo.create_trip_with_participants(
            db,
            destination="Rio de Janeiro",
            starts_at=future_day(30),
            ends_at=future_day(34),
            owner_name="Ana",
            owner_email="a@example.com",
            emails_to_invite=["b@example.com", "c@example.com"],
        )
        guests = await participant_repo.list_guests(db, trip.id)
    return engine, session_factory, trip.id, [guest.id for guest in guests]


def test_trip_flag_flips_only_once(settings):
    async def scenario():
        engine, session_factory, trip_id, _ = await _setup(settings)
        try:
            async with session_factory() as first, session_factory() as second:
                flipped = await trip_repo.mark_trip_confirmed(first, trip_id)
                flipped_again = await trip_repo.mark_trip_confirmed(second, trip_id)
            return flipped, flipped_again
        finally:
            await engine.dispose()

    assert asyncio.run(scenario()) == (True, False)


def test_trip_confirmed_by_another_request_sends_no_mail(settings, mailer):
    async def scenario():
        engine, session_factory, trip_id, _ = await _setup(settings)
        try:
            async with session_factory() as db, session_factory() as other:
                trip = await trip_repo.get_trip(db, trip_id)
                assert trip.is_confirmed is False
                # the other request wins the race after this one loaded the trip
                assert await trip_repo.mark_trip_confirmed(other, trip_id)

                redirect_url = await TripService(settings, mailer).confirm_trip(db, trip_id)

            async with session_factory() as db:
                confirmed = (await trip_repo.get_trip(db, trip_id)).is_confirmed
            return trip_id, redirect_url, confirmed
        finally:
            await engine.dispose()

    trip_id, redirect_url, confirmed = asyncio.run(scenario())

    assert redirect_url == f"{WEB_BASE_URL}/trips/{trip_id}"
    assert confirmed is True
    assert mailer.sent == []


def test_participant_flag_flips_only_once(settings):
    async def scenario():
        engine, session_factory, _, guest_ids = await _setup(settings)
        try:
            async with session_factory() as first, session_factory() as second:
                flipped = await participant_repo.mark_participant_confirmed(first, guest_ids[0])
                flipped_again = await participant_repo.mark_participant_confirmed(second, guest_ids[0])
            return flipped, flipped_again
        finally:
            await engine.dispose()

    assert asyncio.run(scenario()) == (True, False)


def test_participant_confirmed_by_another_request(settings, mailer):
    async def scenario():
        engine, session_factory, trip_id, guest_ids = await _setup(settings)
        guest_id = guest_ids[0]
        try:
            async with session_factory() as db, session_factory() as other:
                participant = await participant_repo.get_participant(db, guest_id)
                assert participant.is_confirmed is False
                assert await participant_repo.mark_participant_confirmed(other, guest_id)

                redirect_url = await ParticipantService(settings, mailer).confirm_participant(db, guest_id)
                flipped_again = await participant_repo.mark_participant_confirmed(db, guest_id)

            async with session_factory() as db:
                confirmed = (await participant_repo.get_participant(db, guest_id)).is_confirmed
                other_guest = (await participant_repo.get_participant(db, guest_ids[1])).is_confirmed
            return trip_id, redirect_url, flipped_again, confirmed, other_guest
        finally:
            await engine.dispose()

    trip_id, redirect_url, flipped_again, confirmed, other_guest = asyncio.run(scenario())

    assert redirect_url == f"{WEB_BASE_URL}/trips/{trip_id}"
    assert flipped_again is False
    assert confirmed is True
    assert other_guest is False
    assert mailer.sent == []
