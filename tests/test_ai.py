from __future__ import annotations


def test_extract_skills(client, register) -> None:
    user = register("user@example.com")
    response = client.post(
        "/api/ai/extract-skills",
        json={"content": "I build REST APIs with Python and Flask"},
        headers=user["headers"],
    )
    assert response.status_code == 200
    body = response.json()
    assert body == {
        "success": True,
        "skills": ["Python", "Flask", "REST API"],
        "count": 3,
        "model": "open-source",
    }

    blank = client.post("/api/ai/extract-skills", json={"content": "   "}, headers=user["headers"])
    assert blank.status_code == 400
    assert client.post("/api/ai/extract-skills", json={"content": "x"}).status_code == 401


def test_job_match_uses_profile_skills(client, register, post_job) -> None:
    employer = register("employer@example.com")
    candidate = register("candidate@example.com", name="Candidate")
    client.put("/api/users/me", json={"skills": ["React", "Python"]}, headers=candidate["headers"])
    job = post_job(employer["headers"], skills=["React", "Node.js"])

    response = client.post("/api/ai/job-match", json={"job_id": job["id"]}, headers=candidate["headers"])
    assert response.status_code == 200
    body = response.json()
    assert body["match"]["skill_match_score"] == 50
    assert body["match"]["overall_match_score"] == 62
    assert body["match"]["matching_skills"] == ["React"]
    assert body["match"]["strategy"] == "substring"
    assert body["job"]["skills"] == ["React", "Node.js"]
    assert body["candidate"]["skills"] == ["React", "Python"]

    missing = client.post("/api/ai/job-match", json={"job_id": 9999}, headers=candidate["headers"])
    assert missing.status_code == 404


def test_job_recommendations_are_ranked(client, register, post_job) -> None:
    employer = register("employer@example.com")
    candidate = register("candidate@example.com")
    client.put("/api/users/me", json={"skills": ["Python", "SQL"]}, headers=candidate["headers"])
    post_job(employer["headers"], title="Go job", skills=["Go"])
    post_job(employer["headers"], title="Data job", skills=["Python", "SQL"])
    post_job(employer["headers"], title="Half job", skills=["Python", "Rust"])

    response = client.get("/api/ai/job-recommendations", headers=candidate["headers"])
    assert response.status_code == 200
    body = response.json()
    assert [r["job"]["title"] for r in body["recommendations"]] == ["Data job", "Half job", "Go job"]
    assert body["recommendations"][0]["match"]["skill_match_score"] == 100
    assert body["pagination"]["total_docs"] == 3

    second_page = client.get(
        "/api/ai/job-recommendations",
        params={"limit": 2, "page": 2},
        headers=candidate["headers"],
    ).json()
    assert [r["job"]["title"] for r in second_page["recommendations"]] == ["Go job"]


def test_job_recommendations_with_no_jobs(client, register) -> None:
    candidate = register("candidate@example.com")
    body = client.get("/api/ai/job-recommendations", headers=candidate["headers"]).json()
    assert body["recommendations"] == []
    assert body["pagination"]["total_docs"] == 0


def test_job_recommendations_total_excludes_unscorable_jobs(client, register, post_job) -> None:
    from jobnet.database import SessionLocal
    from jobnet.models.job import Job

    employer = register("employer@example.com")
    candidate = register("candidate@example.com")
    client.put("/api/users/me", json={"skills": ["Python"]}, headers=candidate["headers"])
    post_job(employer["headers"], title="Good job", skills=["Python"])
    broken = post_job(employer["headers"], title="Broken job", skills=["Python"])
    with SessionLocal() as db:
        db.query(Job).filter(Job.id == broken["id"]).one().skills = "Python"
        db.commit()

    body = client.get("/api/ai/job-recommendations", params={"limit": 1}, headers=candidate["headers"]).json()
    assert [r["job"]["title"] for r in body["recommendations"]] == ["Good job"]
    assert body["pagination"]["total_docs"] == 1
    assert body["pagination"]["has_next_page"] is False


def test_analyze_job(client, register) -> None:
    user = register("user@example.com")
    response = client.post(
        "/api/ai/analyze-job",
        json={"job_description": "Senior remote role in a fast-paced startup"},
        headers=user["headers"],
    )
    assert response.status_code == 200
    analysis = response.json()["analysis"]
    assert analysis["experience_level"] == "senior"
    assert analysis["remote_friendly"] is True
    assert analysis["company_culture"] == ["Fast-paced environment"]


def test_application_suggestions(client, register, post_job) -> None:
    employer = register("employer@example.com")
    candidate = register("candidate@example.com")
    client.put("/api/users/me", json={"skills": ["Python", "SQL", "Docker", "Go"]}, headers=candidate["headers"])
    job = post_job(employer["headers"])

    response = client.post("/api/ai/application-suggestions", json={"job_id": job["id"]}, headers=candidate["headers"])
    assert response.status_code == 200
    body = response.json()
    assert body["suggestions"]["skill_highlights"] == ["Python", "SQL", "Docker"]
    assert body["job"] == {"id": job["id"], "title": job["title"], "company": job["company"]}


def test_batch_skill_extraction(client, register) -> None:
    user = register("user@example.com")
    response = client.post(
        "/api/ai/batch-skill-extraction",
        json={"contents": ["Docker and Kubernetes", {"text": "baking bread"}]},
        headers=user["headers"],
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total_processed"] == 2
    assert body["results"][0]["skills"] == ["Docker", "Kubernetes"]
    assert body["results"][1] == {"content": "baking bread", "skills": [], "count": 0}

    too_many = client.post(
        "/api/ai/batch-skill-extraction",
        json={"contents": ["Python"] * 11},
        headers=user["headers"],
    )
    assert too_many.status_code == 400


def test_match_history_covers_applied_jobs(client, register, post_job) -> None:
    employer = register("employer@example.com")
    candidate = register("candidate@example.com")
    client.put("/api/users/me", json={"skills": ["Python"]}, headers=candidate["headers"])
    applied = post_job(employer["headers"], title="Applied", skills=["Python"])
    post_job(employer["headers"], title="Ignored", skills=["Python"])
    client.post(f"/api/jobs/{applied['id']}/apply", json={"cover_letter": "hi"}, headers=candidate["headers"])

    body = client.get("/api/ai/match-history", headers=candidate["headers"]).json()
    assert [item["job"]["title"] for item in body["match_history"]] == ["Applied"]
    assert body["match_history"][0]["job"]["applied_at"] is not None
    assert body["match_history"][0]["match"]["skill_match_score"] == 100
    assert body["pagination"]["total_docs"] == 1
