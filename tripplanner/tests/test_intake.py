"""
Tests for the intake adapter.

Covers form validation, end date defaulting, return date selection and
persistence of the submitted TripRequest.
"""

import json
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from tripplanner.intake.form_state import (
    DateNotSelectableError,
    TripFormState,
    derive_end_date,
    is_departure_selectable,
    is_return_selectable,
    select_return_date,
)
from tripplanner.intake.schemas import TripFormValidationError, validate_trip_form
from tripplanner.intake.storage import (
    TRIP_FORM_DATA_KEY,
    TripStore,
    TripStoreCorruptError,
    read_trip_request,
    save_trip_request,
)
from tripplanner.shared.contracts.trip_request import TripRequest


# ============================================================================
# Test Fixtures
# ============================================================================

# Calendar "today" for form tests; every date below is selectable from it
FORM_TODAY = date(2025, 8, 1)


def _make_form_values(**overrides):
    """Form values as the trip form produces them (numbers as strings)."""
    values = {
        "destination": "",
        "startDate": date(2025, 9, 1),
        "endDate": date(2025, 9, 7),
        "numberOfPeople": "2",
        "vacationType": "Beach",
        "budget": "50000",
    }
    values.update(overrides)
    return values


def _make_store(tmp_path):
    return TripStore(tmp_path / "store.json")


# ============================================================================
# TestValidateTripForm
# ============================================================================


class TestValidateTripForm:
    """Tests for the validation schema."""

    def test_valid_form_produces_trip_request(self):
        result = validate_trip_form(_make_form_values())

        assert result == TripRequest(
            start_date=date(2025, 9, 1),
            end_date=date(2025, 9, 7),
            budget=50000,
            vacation_type="Beach",
            number_of_people=2,
        )
        assert isinstance(result.budget, int)
        assert isinstance(result.number_of_people, int)

    def test_empty_destination_means_planner_chooses(self):
        result = validate_trip_form(_make_form_values(destination="   "))
        assert result.destination is None

    def test_destination_kept_when_long_enough(self):
        result = validate_trip_form(_make_form_values(destination="Goa"))
        assert result.destination == "Goa"

    def test_one_character_destination_rejected(self):
        with pytest.raises(TripFormValidationError) as exc_info:
            validate_trip_form(_make_form_values(destination="G"))

        assert exc_info.value.errors == {
            "destination": "Destination must be at least 2 characters."
        }

    @pytest.mark.parametrize("end", [date(2025, 9, 1), date(2025, 8, 25)])
    def test_end_date_not_after_start_is_attached_to_end_date(self, end):
        with pytest.raises(TripFormValidationError) as exc_info:
            validate_trip_form(_make_form_values(endDate=end))

        assert exc_info.value.errors == {
            "endDate": "Return date must be after departure date"
        }

    def test_missing_dates_reported_per_field(self):
        with pytest.raises(TripFormValidationError) as exc_info:
            validate_trip_form(_make_form_values(startDate=None, endDate=None))

        errors = exc_info.value.errors
        assert errors["startDate"] == "Please select a departure date."
        assert errors["endDate"] == "Please select a return date."

    def test_unparseable_date_uses_field_message(self):
        with pytest.raises(TripFormValidationError) as exc_info:
            validate_trip_form(_make_form_values(startDate="not-a-date"))

        assert exc_info.value.errors["startDate"] == "Please select a departure date."

    def test_empty_selections_reported(self):
        with pytest.raises(TripFormValidationError) as exc_info:
            validate_trip_form(
                _make_form_values(numberOfPeople="", vacationType="", budget="")
            )

        assert exc_info.value.errors == {
            "numberOfPeople": "Please select number of travelers.",
            "vacationType": "Please select a vacation type.",
            "budget": "Budget is required.",
        }

    @pytest.mark.parametrize("budget", ["0", "-500", "lots"])
    def test_budget_must_be_positive_integer(self, budget):
        with pytest.raises(TripFormValidationError) as exc_info:
            validate_trip_form(_make_form_values(budget=budget))

        assert "budget" in exc_info.value.errors

    def test_numeric_inputs_are_coerced(self):
        result = validate_trip_form(_make_form_values(numberOfPeople=4, budget=120000))

        assert result.number_of_people == 4
        assert result.budget == 120000

    def test_iso_strings_accepted_for_dates(self):
        result = validate_trip_form(
            _make_form_values(startDate="2025-12-20", endDate="2025-12-27")
        )

        assert result.start_date == date(2025, 12, 20)
        assert result.end_date == date(2025, 12, 27)

    def test_vacation_type_not_restricted_to_menu(self):
        result = validate_trip_form(_make_form_values(vacationType="Food"))
        assert result.vacation_type == "Food"


# ============================================================================
# TestDeriveEndDate
# ============================================================================


class TestDeriveEndDate:
    """Tests for the one-week default applied when the start date changes."""

    def test_unset_end_date_defaults_to_one_week(self):
        assert derive_end_date(date(2025, 9, 1), None) == date(2025, 9, 7)

    def test_equal_end_date_defaults_to_one_week(self):
        assert derive_end_date(date(2025, 9, 1), date(2025, 9, 1)) == date(2025, 9, 7)

    def test_earlier_end_date_defaults_to_one_week(self):
        assert derive_end_date(date(2025, 9, 10), date(2025, 9, 3)) == date(2025, 9, 16)

    def test_later_end_date_is_kept(self):
        assert derive_end_date(date(2025, 9, 1), date(2025, 9, 2)) == date(2025, 9, 2)

    def test_default_crosses_month_boundary(self):
        assert derive_end_date(date(2025, 12, 28), None) == date(2026, 1, 3)

    def test_default_for_every_start_in_a_month(self):
        start = date(2025, 2, 1)
        for offset in range(28):
            day = start + timedelta(days=offset)
            assert derive_end_date(day, day) == day + timedelta(days=6)


# ============================================================================
# TestSelectReturnDate
# ============================================================================


class TestSelectReturnDate:
    """Tests for the calendar's same-day return adjustment."""

    def test_same_day_advances_by_one(self):
        assert select_return_date(date(2025, 9, 1), date(2025, 9, 1)) == date(2025, 9, 2)

    def test_other_day_unchanged(self):
        assert select_return_date(date(2025, 9, 1), date(2025, 9, 5)) == date(2025, 9, 5)

    def test_without_departure_unchanged(self):
        assert select_return_date(None, date(2025, 9, 5)) == date(2025, 9, 5)

    def test_cleared_selection_stays_cleared(self):
        assert select_return_date(date(2025, 9, 1), None) is None


# ============================================================================
# TestTripFormState
# ============================================================================


class TestTripFormState:
    """Tests for the explicit form state object."""

    def test_defaults_match_form(self):
        state = TripFormState(today=FORM_TODAY)

        assert state.number_of_people == "2"
        assert state.vacation_type == "Beach"
        assert state.budget == "50000"
        assert state.destination == ""
        assert state.start_date is None and state.end_date is None

    def test_setting_start_date_defaults_end_date(self):
        state = TripFormState(today=FORM_TODAY)
        state.set_start_date(date(2025, 9, 1))

        assert state.end_date == date(2025, 9, 7)
        assert "endDate" not in state.errors

    def test_moving_start_past_end_resets_end_and_clears_error(self):
        state = TripFormState(today=FORM_TODAY, start_date=date(2025, 9, 1), end_date=date(2025, 9, 3))
        state.errors["endDate"] = "Return date must be after departure date"

        state.set_start_date(date(2025, 9, 5))

        assert state.end_date == date(2025, 9, 11)
        assert "endDate" not in state.errors

    def test_valid_end_date_survives_start_change(self):
        state = TripFormState(today=FORM_TODAY, start_date=date(2025, 9, 1), end_date=date(2025, 9, 20))
        state.set_start_date(date(2025, 9, 3))

        assert state.end_date == date(2025, 9, 20)

    def test_selecting_same_day_return_stores_next_day(self, tmp_path):
        store = _make_store(tmp_path)
        state = TripFormState(today=FORM_TODAY)
        state.set_start_date(date(2025, 9, 1))
        state.select_end_date(date(2025, 9, 1))

        trip_request = state.submit(store)

        assert state.end_date == date(2025, 9, 2)
        assert trip_request.end_date == date(2025, 9, 2)
        assert read_trip_request(store).end_date == date(2025, 9, 2)

    def test_submit_writes_formatted_request(self, tmp_path):
        store = _make_store(tmp_path)
        state = TripFormState(today=FORM_TODAY, destination="Goa")
        state.set_start_date(date(2025, 9, 1))

        state.submit(store)

        stored = json.loads(store.get_item(TRIP_FORM_DATA_KEY))
        assert stored == {
            "startDate": "2025-09-01",
            "endDate": "2025-09-07",
            "budget": 50000,
            "vacationType": "Beach",
            "numberOfPeople": 2,
            "destination": "Goa",
        }

    def test_invalid_submit_writes_nothing(self, tmp_path):
        store = _make_store(tmp_path)
        state = TripFormState(today=FORM_TODAY, budget="")

        with pytest.raises(TripFormValidationError):
            state.submit(store)

        assert state.errors["budget"] == "Budget is required."
        assert state.errors["startDate"] == "Please select a departure date."
        assert store.get_item(TRIP_FORM_DATA_KEY) is None

    def test_successful_validate_clears_errors(self):
        state = TripFormState(today=FORM_TODAY, errors={"budget": "Budget is required."})
        state.set_start_date(date(2025, 9, 1))

        assert state.validate() is not None
        assert state.errors == {}

    def test_past_departure_is_not_selectable(self):
        state = TripFormState(today=FORM_TODAY)

        with pytest.raises(DateNotSelectableError) as exc_info:
            state.set_start_date(date(2025, 7, 31))

        assert exc_info.value.field_name == "startDate"
        assert state.start_date is None and state.end_date is None

    def test_departure_today_is_selectable(self):
        state = TripFormState(today=FORM_TODAY)
        state.set_start_date(FORM_TODAY)

        assert state.end_date == date(2025, 8, 7)

    def test_return_before_departure_is_not_selectable(self):
        state = TripFormState(today=FORM_TODAY)
        state.set_start_date(date(2025, 9, 10))

        with pytest.raises(DateNotSelectableError) as exc_info:
            state.select_end_date(date(2025, 9, 9))

        assert exc_info.value.earliest == date(2025, 9, 10)
        assert state.end_date == date(2025, 9, 16)


# ============================================================================
# TestCalendarRules
# ============================================================================


class TestCalendarRules:
    """Tests for the days the date pickers allow."""

    def test_departure_days(self):
        assert is_departure_selectable(FORM_TODAY, FORM_TODAY)
        assert is_departure_selectable(date(2025, 12, 1), FORM_TODAY)
        assert not is_departure_selectable(date(2025, 7, 31), FORM_TODAY)

    def test_return_days_bounded_by_departure(self):
        departure = date(2025, 9, 1)

        assert is_return_selectable(departure, departure, FORM_TODAY)
        assert is_return_selectable(date(2025, 9, 5), departure, FORM_TODAY)
        assert not is_return_selectable(date(2025, 8, 31), departure, FORM_TODAY)

    def test_return_days_bounded_by_today_without_departure(self):
        assert is_return_selectable(FORM_TODAY, None, FORM_TODAY)
        assert not is_return_selectable(date(2025, 7, 31), None, FORM_TODAY)


# ============================================================================
# TestTripStore
# ============================================================================


class TestTripStore:
    """Tests for persistence of the submitted request."""

    def test_round_trip_preserves_all_fields(self, tmp_path):
        store = _make_store(tmp_path)
        original = TripRequest(
            start_date=date(2025, 9, 1),
            end_date=date(2025, 9, 7),
            budget=50000,
            vacation_type="Cultural",
            number_of_people=3,
            destination="Jaipur",
        )

        save_trip_request(store, original)
        loaded = read_trip_request(store)

        assert loaded == original
        assert isinstance(loaded.budget, int)
        assert isinstance(loaded.number_of_people, int)

    def test_round_trip_survives_new_store_instance(self, tmp_path):
        original = validate_trip_form(_make_form_values())
        save_trip_request(_make_store(tmp_path), original)

        assert read_trip_request(_make_store(tmp_path)) == original

    def test_next_submission_overwrites(self, tmp_path):
        store = _make_store(tmp_path)
        save_trip_request(store, validate_trip_form(_make_form_values()))
        second = validate_trip_form(_make_form_values(budget="90000", numberOfPeople="4"))

        save_trip_request(store, second)

        assert read_trip_request(store) == second

    def test_other_keys_untouched(self, tmp_path):
        store = _make_store(tmp_path)
        store.set_item("theme", "dark")

        save_trip_request(store, validate_trip_form(_make_form_values()))

        assert store.get_item("theme") == "dark"

    def test_missing_entry_reads_as_none(self, tmp_path):
        assert read_trip_request(_make_store(tmp_path)) is None

    def test_store_path_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TRIP_PLANNER_STORE_PATH", str(tmp_path / "env.json"))
        assert TripStore().path == tmp_path / "env.json"

    def test_write_leaves_no_temp_files(self, tmp_path):
        store = _make_store(tmp_path)
        save_trip_request(store, validate_trip_form(_make_form_values()))
        store.set_item("theme", "dark")

        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]

    @pytest.mark.parametrize("contents", ["{not json", "[1, 2]"])
    def test_unreadable_store_file_raises(self, tmp_path, contents):
        store = _make_store(tmp_path)
        store.path.write_text(contents, encoding="utf-8")

        with pytest.raises(TripStoreCorruptError):
            read_trip_request(store)

    def test_submission_replaces_unreadable_store(self, tmp_path):
        store = _make_store(tmp_path)
        store.path.write_text('{"tripFormData": "{\\"startDa', encoding="utf-8")
        trip_request = validate_trip_form(_make_form_values())

        save_trip_request(store, trip_request)

        assert read_trip_request(store) == trip_request

    def test_stored_value_of_wrong_shape_fails_validation(self, tmp_path):
        store = _make_store(tmp_path)
        store.set_item(TRIP_FORM_DATA_KEY, json.dumps({"from": "BOM", "to": "GOI"}))

        with pytest.raises(ValidationError):
            read_trip_request(store)
