"""
Tests for the job board operations as the transports call them.
"""

import pytest

from jobboard.errors import Forbidden, InvalidInput, InvalidToken, AuthError, Conflict, NotFound
from jobboard.services.catalog import JobFilters


class TestAccounts:

    def test_register_returns_usable_token(self, board, seeker):
        claims = board.authenticate(seeker.token)

        assert claims.user_id == seeker.user.id
        assert claims.role == "jobseeker"
        assert claims.email == "aminata@slmail.com"

    def test_login_token_matches_registration(self, board, employer):
        result = board.login("hr@techsl.com", "employer-pass")

        registered = board.authenticate(employer.token)
        logged_in = board.authenticate(result.token)
        assert (logged_in.user_id, logged_in.role) == (registered.user_id, registered.role)
        assert result.user.name == "Tech Sierra Leone"

    def test_login_failures_look_the_same(self, board, employer):
        with pytest.raises(AuthError) as wrong_password:
            board.login("hr@techsl.com", "nope")
        with pytest.raises(AuthError) as unknown:
            board.login("ghost@techsl.com", "employer-pass")

        assert str(wrong_password.value) == str(unknown.value)

    def test_admin_registration(self, board):
        result = board.register("boss@slmail.com", "pw", "Boss", "admin")

        assert result.user.role == "admin"
        assert board.authenticate(result.token).role == "admin"

    def test_unknown_role_rejected(self, board):
        with pytest.raises(InvalidInput):
            board.register("boss@slmail.com", "pw", "Boss", "superuser")

    def test_repeat_registration_conflicts(self, board, seeker):
        with pytest.raises(Conflict):
            board.register("aminata@slmail.com", "another", "Someone Else", "employer")


class TestPostJob:

    def test_employer_posts_job(self, board, employer, job_input):
        job_id = board.post_job(employer.token, job_input())

        job = board.get_job(job_id)
        assert job.employer_id == employer.user.id
        assert job.employer_name == "Tech Sierra Leone"

    def test_jobseeker_forbidden_and_nothing_written(self, board, seeker, job_input):
        with pytest.raises(Forbidden):
            board.post_job(seeker.token, job_input())

        assert board.search_jobs(JobFilters()) == []

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_requires_valid_token(self, board, token, job_input):
        with pytest.raises(InvalidToken):
            board.post_job(token, job_input())


class TestApplications:

    def test_apply_and_list(self, board, employer, seeker, job_input):
        job_id = board.post_job(employer.token, job_input())

        application_id = board.apply_to_job(seeker.token, job_id, "Hello")
        applications = board.my_applications(seeker.token)

        assert [a.id for a in applications] == [application_id]
        assert applications[0].job.title == "Junior Software Developer"

    def test_employer_cannot_apply(self, board, employer, job_input):
        job_id = board.post_job(employer.token, job_input())

        with pytest.raises(Forbidden):
            board.apply_to_job(employer.token, job_id)

    def test_role_checked_before_job_id(self, board, employer, seeker):
        with pytest.raises(Forbidden):
            board.apply_to_job(employer.token, None)
        with pytest.raises(InvalidInput):
            board.apply_to_job(seeker.token, None)

    def test_my_applications_requires_token(self, board):
        with pytest.raises(InvalidToken):
            board.my_applications(None)

    def test_current_user_unknown_after_token_issued(self, board, issuer):
        with pytest.raises(NotFound):
            board.current_user(issuer.issue(9999, "gone@slmail.com", "jobseeker"))

    def test_my_applications_empty_for_employer(self, board, employer):
        assert board.my_applications(employer.token) == []


class TestPublicReads:

    def test_reads_need_no_token(self, board):
        assert len(board.list_districts()) == 16
        assert len(board.district_job_counts()) == 16
        assert board.search_jobs() == []
