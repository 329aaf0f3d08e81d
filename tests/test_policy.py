"""
Tests for the role rules gating writes.
"""

import pytest

from jobboard.errors import Forbidden
from jobboard.services import policy


@pytest.mark.parametrize("role, allowed", [("employer", True), ("jobseeker", False), ("admin", False)])
def test_only_employers_post_jobs(role, allowed):
    assert policy.can_post_job(role) is allowed


@pytest.mark.parametrize("role, allowed", [("jobseeker", True), ("employer", False), ("admin", False)])
def test_only_jobseekers_apply(role, allowed):
    assert policy.can_apply(role) is allowed


def test_require_helpers_raise_forbidden():
    with pytest.raises(Forbidden):
        policy.require_can_post_job("jobseeker")
    with pytest.raises(Forbidden):
        policy.require_can_apply("employer")

    policy.require_can_post_job("employer")
    policy.require_can_apply("jobseeker")
