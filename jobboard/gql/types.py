from graphene import ObjectType, String, Int, List, Field, Boolean, DateTime


class DistrictObject(ObjectType):
    id = Int()
    name = String()
    region = String()
    coordinates = String()


class DistrictJobCountObject(ObjectType):
    name = String()
    job_count = Int()

    # Rows arrive as (name, count) tuples
    @staticmethod
    def resolve_name(root, info):
        return root[0]

    @staticmethod
    def resolve_job_count(root, info):
        return root[1]


class UserObject(ObjectType):
    id = Int()
    email = String()
    name = String()
    role = String()
    district = String()
    phone = String()
    skills = List(String)

    @staticmethod
    def resolve_skills(root, info):
        return root.skill_list


class JobObject(ObjectType):
    id = Int()
    title = String()
    company = String()
    location = String()
    district = String()
    type = String()
    experience = String()
    salary = String()
    category = String()
    description = String()
    requirements = String()
    is_remote = Boolean()
    is_green_job = Boolean()
    employer_id = Int()
    employer_name = String()
    employer_email = String()
    created_at = DateTime()
    expires_at = DateTime()


class ApplicationObject(ObjectType):
    id = Int()
    job_id = Int()
    user_id = Int()
    status = String()
    cover_letter = String()
    created_at = DateTime()
    # Summary of the job applied to
    title = String()
    company = String()
    location = String()
    district = String()
    job = Field(lambda: JobObject)

    @staticmethod
    def resolve_title(root, info):
        return root.job.title

    @staticmethod
    def resolve_company(root, info):
        return root.job.company

    @staticmethod
    def resolve_location(root, info):
        return root.job.location

    @staticmethod
    def resolve_district(root, info):
        return root.job.district

    @staticmethod
    def resolve_job(root, info):
        return root.job

