"""
State machine tests.
Legal and illegal transitions must raise appropriate errors.
"""

from django.test import SimpleTestCase

from shelter.exceptions import InvalidTransitionError, ValidationError
from apps.adoptions.state_machine import (
    ACTIVE_STATUSES,
    allowed_transitions,
    animal_status_after,
    ensure_not_terminal,
    is_terminal_state,
    validate_transition,
)


class StateMachineTransitionTests(SimpleTestCase):
    """Test validate_transition for AdoptionRequest."""

    def test_legal_transitions(self):
        """Legal AdoptionRequest transitions do not raise."""
        validate_transition("Pending", "Interview Scheduled")
        validate_transition("Pending", "Approved")
        validate_transition("Pending", "Rejected")
        validate_transition("Interview Scheduled", "Approved")
        validate_transition("Interview Scheduled", "Rejected")
        validate_transition("Approved", "Completed")
        validate_transition("Approved", "Cancelled")

    def test_illegal_backward_transition(self):
        """Interview Scheduled -> Pending is invalid."""
        with self.assertRaises(InvalidTransitionError) as ctx:
            validate_transition("Interview Scheduled", "Pending")
        self.assertIn("Invalid transition", str(ctx.exception))
        self.assertEqual(ctx.exception.code, "INVALID_TRANSITION")

    def test_illegal_pending_to_completed(self):
        """Completion requires approval first."""
        with self.assertRaises(InvalidTransitionError):
            validate_transition("Pending", "Completed")

    def test_pending_cannot_be_cancelled(self):
        with self.assertRaises(InvalidTransitionError):
            validate_transition("Pending", "Cancelled")

    def test_terminal_statuses_reject_everything(self):
        for terminal in ("Rejected", "Completed", "Cancelled"):
            for target in ("Pending", "Interview Scheduled", "Approved", terminal):
                with self.subTest(terminal=terminal, target=target):
                    with self.assertRaises(InvalidTransitionError) as ctx:
                        validate_transition(terminal, target)
                    self.assertIn("terminal", str(ctx.exception).lower())

    def test_unknown_target_is_validation_error(self):
        with self.assertRaises(ValidationError):
            validate_transition("Pending", "Adopted")

    def test_terminal_reported_before_unknown_target(self):
        with self.assertRaises(InvalidTransitionError):
            validate_transition("Completed", "Bogus")

    def test_is_terminal_state(self):
        self.assertTrue(is_terminal_state("Rejected"))
        self.assertTrue(is_terminal_state("Completed"))
        self.assertTrue(is_terminal_state("Cancelled"))
        self.assertFalse(is_terminal_state("Pending"))
        self.assertFalse(is_terminal_state("Approved"))

    def test_ensure_not_terminal_matches_is_terminal_state(self):
        for status in ("Pending", "Interview Scheduled", "Approved"):
            ensure_not_terminal(status)
        for status in ("Rejected", "Completed", "Cancelled"):
            with self.subTest(status=status):
                self.assertTrue(is_terminal_state(status))
                with self.assertRaises(InvalidTransitionError):
                    ensure_not_terminal(status, "Approved")
        with self.assertRaises(InvalidTransitionError):
            ensure_not_terminal("Unknown")

    def test_active_statuses(self):
        self.assertEqual(
            sorted(ACTIVE_STATUSES), ["Approved", "Interview Scheduled", "Pending"]
        )

    def test_allowed_transitions(self):
        self.assertEqual(allowed_transitions("Approved"), ["Completed", "Cancelled"])
        self.assertEqual(allowed_transitions("Completed"), [])


class AnimalPolicyTests(SimpleTestCase):
    """Animal status implied by request transitions."""

    def test_approved_reserves_available_animal(self):
        self.assertEqual(animal_status_after("Approved", "Available"), "Reserved")

    def test_approved_leaves_other_animal_status(self):
        self.assertIsNone(animal_status_after("Approved", "In Treatment"))

    def test_completed_always_adopts(self):
        self.assertEqual(animal_status_after("Completed", "Reserved"), "Adopted")
        self.assertEqual(animal_status_after("Completed", "Available"), "Adopted")

    def test_rejected_and_cancelled_release_reserved_animal(self):
        self.assertEqual(animal_status_after("Rejected", "Reserved"), "Available")
        self.assertEqual(animal_status_after("Cancelled", "Reserved"), "Available")

    def test_rejected_leaves_unreserved_animal(self):
        self.assertIsNone(animal_status_after("Rejected", "Quarantine"))
        self.assertIsNone(animal_status_after("Cancelled", "Available"))

    def test_interview_does_not_touch_animal(self):
        self.assertIsNone(animal_status_after("Interview Scheduled", "Available"))
