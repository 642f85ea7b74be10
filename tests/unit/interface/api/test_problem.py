"""Unit tests for problem bodies."""

from thanks.application.binder import Violation
from thanks.interface.api.problem import problem_body
from thanks.interface.error import Problem

TYPE_URL = "https://developer.claromentis.com"


class TestProblemBody:
    """Tests for problem_body."""

    def test_without_violations_has_no_invalid_params(self):
        body = problem_body(Problem(404, "Thank You 3 could not be found"), TYPE_URL)

        assert body == {
            "type": TYPE_URL,
            "title": "Thank You 3 could not be found",
            "status": 404,
        }

    def test_violations_keep_order(self):
        problem = Problem(
            400,
            "Failed to create Thank You",
            [Violation("thanked", "empty"), Violation("description", "empty")],
        )

        body = problem_body(problem, TYPE_URL)

        assert body["invalid-params"] == [
            {"name": "thanked", "reason": "empty"},
            {"name": "description", "reason": "empty"},
        ]
