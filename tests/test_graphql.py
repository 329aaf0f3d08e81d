"""
Tests for the GraphQL schema, executed directly against a board.
"""

from types import SimpleNamespace

import pytest

from jobboard.gql.schema import schema


def context(board, token=None):
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    request = SimpleNamespace(headers=headers, app=SimpleNamespace(state=SimpleNamespace(board=board)))
    return {"request": request}


def run(board, query, token=None, **variables):
    return schema.execute(query, context_value=context(board, token), variable_values=variables)


POST_JOB = """
mutation Post($title: String!, $remote: Boolean) {
  postJob(title: $title, company: "Green Power SL", location: "Bo", district: "Bo",
          type: "Full-time", category: "energy", description: "Install solar kits.",
          isGreenJob: true, isRemote: $remote) {
    jobId
    job { title employerName isGreenJob isRemote }
  }
}
"""


class TestAccounts:

    def test_register_and_login(self, board):
        result = run(board, """
            mutation { registerUser(email: "gql@slmail.com", password: "pw", name: "Gql User",
                                    role: "jobseeker", skills: ["Welding"]) { token user { id role skills } } }
        """)
        assert result.errors is None
        registered = result.data["registerUser"]
        assert registered["user"]["skills"] == ["Welding"]

        result = run(board, 'mutation { loginUser(email: "gql@slmail.com", password: "pw") { token user { id } } }')
        assert result.errors is None
        assert result.data["loginUser"]["user"]["id"] == registered["user"]["id"]

    def test_bad_login_reports_code(self, board):
        result = run(board, 'mutation { loginUser(email: "none@slmail.com", password: "pw") { token } }')

        assert result.errors[0].message == "Invalid email or password"
        assert result.errors[0].extensions["code"] == "AUTH_ERROR"


class TestJobs:

    def test_employer_posts_job(self, board, employer):
        result = run(board, POST_JOB, token=employer.token, title="Solar Technician")

        assert result.errors is None
        job = result.data["postJob"]["job"]
        assert job == {"title": "Solar Technician", "employerName": "Tech Sierra Leone",
                       "isGreenJob": True, "isRemote": False}

    def test_seeker_forbidden(self, board, seeker):
        result = run(board, POST_JOB, token=seeker.token, title="Solar Technician")

        assert result.errors[0].extensions["code"] == "FORBIDDEN"
        assert board.search_jobs() == []

    def test_missing_token(self, board):
        result = run(board, POST_JOB, title="Solar Technician")

        assert result.errors[0].extensions["code"] == "INVALID_TOKEN"

    def test_search_and_fetch(self, board, employer):
        run(board, POST_JOB, token=employer.token, title="Solar Technician")
        run(board, POST_JOB, token=employer.token, title="Remote Energy Analyst", remote=True)

        result = run(board, '{ jobs(remote: true) { id title } all: jobs { title } }')
        assert result.errors is None
        assert [j["title"] for j in result.data["jobs"]] == ["Remote Energy Analyst"]
        assert [j["title"] for j in result.data["all"]] == ["Remote Energy Analyst", "Solar Technician"]

        job_id = result.data["jobs"][0]["id"]
        result = run(board, "query Job($id: Int!) { job(id: $id) { title district employerEmail } }", id=job_id)
        assert result.data["job"] == {"title": "Remote Energy Analyst", "district": "Bo",
                                      "employerEmail": "hr@techsl.com"}

    def test_unknown_job(self, board):
        result = run(board, "{ job(id: 404) { title } }")

        assert result.errors[0].extensions["code"] == "NOT_FOUND"


class TestApplications:

    @pytest.fixture
    def job_id(self, board, employer):
        return run(board, POST_JOB, token=employer.token, title="Solar Technician").data["postJob"]["jobId"]

    def test_apply_once_and_list(self, board, seeker, job_id):
        apply = "mutation Apply($id: Int!) { applyToJob(jobId: $id, coverLetter: \"Keen\") { applicationId status } }"

        first = run(board, apply, token=seeker.token, id=job_id)
        second = run(board, apply, token=seeker.token, id=job_id)

        assert first.data["applyToJob"]["status"] == "pending"
        assert second.errors[0].extensions["code"] == "DUPLICATE_APPLICATION"

        result = run(board, "{ myApplications { id status coverLetter title company district } }", token=seeker.token)
        assert result.errors is None
        assert result.data["myApplications"] == [{
            "id": first.data["applyToJob"]["applicationId"], "status": "pending", "coverLetter": "Keen",
            "title": "Solar Technician", "company": "Green Power SL", "district": "Bo",
        }]


class TestDistricts:

    def test_districts_and_counts(self, board):
        result = run(board, "{ districts { name region } regions districtJobCounts { name jobCount } }")

        assert result.errors is None
        assert len(result.data["districts"]) == 16
        assert result.data["regions"] == ["Western", "Northern", "North West", "Southern"]
        assert {row["jobCount"] for row in result.data["districtJobCounts"]} == {0}


class TestMe:

    def test_me_returns_token_owner(self, board, seeker):
        result = run(board, "{ me { id email role district skills } }", token=seeker.token)

        assert result.errors is None
        assert result.data["me"] == {"id": seeker.user.id, "email": "aminata@slmail.com", "role": "jobseeker",
                                     "district": "Bo", "skills": ["Nursing", "Communication"]}

    def test_me_requires_token(self, board):
        result = run(board, "{ me { id } }")

        assert result.errors[0].extensions["code"] == "INVALID_TOKEN"
