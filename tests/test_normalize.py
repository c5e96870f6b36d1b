from jobgate.jobs.normalize import (
    INDEED_ALIASES,
    LINKEDIN_ALIASES,
    NA,
    normalize_listing,
    normalize_listings,
)


def test_alias_fallback_uses_second_key():
    job = normalize_listing({"jobTitle": "Data Engineer"}, LINKEDIN_ALIASES)
    assert job.title == "Data Engineer"


def test_first_alias_wins():
    job = normalize_listing({"title": "A", "jobTitle": "B"}, LINKEDIN_ALIASES)
    assert job.title == "A"
    # Indeed prefers positionName
    job = normalize_listing({"title": "A", "positionName": "C"}, INDEED_ALIASES)
    assert job.title == "C"


def test_core_fields_fall_back_to_na():
    job = normalize_listing({}, LINKEDIN_ALIASES)
    assert (job.title, job.company, job.location, job.posted_at, job.url) == (NA, NA, NA, NA, NA)


def test_empty_values_count_as_missing():
    job = normalize_listing({"title": "", "jobTitle": "Backup"}, LINKEDIN_ALIASES)
    assert job.title == "Backup"


def test_optional_extras_only_when_present():
    job = normalize_listing({"title": "A"}, LINKEDIN_ALIASES)
    assert job.salary is None
    assert job.employment_type is None
    assert job.applicant_count is None
    assert job.description is None

    job = normalize_listing({"salaryRange": "$100k", "employmentType": "Full-time", "applicantsCount": 42}, LINKEDIN_ALIASES)
    assert job.salary == "$100k"
    assert job.employment_type == "Full-time"
    assert job.applicant_count == "42"


def test_indeed_specific_aliases():
    job = normalize_listing({"estimatedSalary": "$90k", "schedule": "Part-time", "companyRating": 4.1}, INDEED_ALIASES)
    assert job.salary == "$90k"
    assert job.employment_type == "Part-time"
    assert job.company_rating == "4.1"


def test_long_description_truncated():
    job = normalize_listing({"description": "x" * 250}, LINKEDIN_ALIASES)
    assert job.description == "x" * 200 + "..."
    assert len(job.description) == 203


def test_short_description_untouched():
    job = normalize_listing({"description": "y" * 200}, LINKEDIN_ALIASES)
    assert job.description == "y" * 200


def test_limit_and_order():
    items = [{"title": f"Job {i}"} for i in range(10)]
    jobs = normalize_listings(items, LINKEDIN_ALIASES, limit=3)
    assert [j.title for j in jobs] == ["Job 0", "Job 1", "Job 2"]


def test_non_object_items_skipped():
    jobs = normalize_listings(["junk", {"title": "Real"}], LINKEDIN_ALIASES, limit=5)
    assert [j.title for j in jobs] == ["Real"]


def test_list_and_bool_values_render_as_text():
    job = normalize_listing({"salary": ["$90k", "$120k"], "applicants": True}, LINKEDIN_ALIASES)
    assert job.salary == "$90k, $120k"
    assert job.applicant_count == "true"
