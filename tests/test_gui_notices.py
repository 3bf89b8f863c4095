"""
Tests for messages carried across a Streamlit rerun.
"""

from room_calendar.gui.app import pop_notices, queue_notices
from room_calendar.validation.validator import ValidationWarning


class TestNotices:
    """Warnings queued before st.rerun() are shown once on the next run."""

    def test_warnings_survive_until_read(self):
        state = {}
        queue_notices(state, [ValidationWarning("Overlaps booked reservation a")], "Saved.")
        assert pop_notices(state) == (["Overlaps booked reservation a"], "Saved.")

    def test_read_once(self):
        state = {}
        queue_notices(state, [], "Deleted.")
        pop_notices(state)
        assert pop_notices(state) == ([], None)

    def test_nothing_queued(self):
        assert pop_notices({"current_date": None}) == ([], None)
