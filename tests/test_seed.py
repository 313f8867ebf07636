from portfolio.models.experience import Experience
from portfolio.models.profile import Profile
from portfolio.models.project import Project
from portfolio.models.skill import Skill
from portfolio.scripts.create_admin import create_admin
from portfolio.scripts.seed import seed


def test_seed_is_idempotent(db_session):
    first = seed(db_session)
    second = seed(db_session)

    assert first == second == {"projects": 2, "skills": 7, "experiences": 2}
    assert db_session.query(Profile).count() == 1
    assert db_session.query(Project).filter(Project.featured.is_(True)).count() == 1
    assert db_session.query(Skill).filter(Skill.category == "Frontend").count() == 4
    assert db_session.query(Experience).filter(Experience.current.is_(True)).count() == 1


def test_seeded_content_is_served(client, db_session):
    seed(db_session)

    projects = client.get("/api/projects").json()
    assert projects["pagination"]["total"] == 2
    featured = [p for p in projects["data"] if p["featured"]]
    assert [p["slug"] for p in featured] == ["ecommerce-platform"]
    assert client.get(f"/api/projects/{featured[0]['id']}").status_code == 200


def test_create_admin_runs_once(db_session):
    user = create_admin(db_session, "Owner@Example.com", "s3cret-pass")

    assert user.email == "owner@example.com"
    assert user.password != "s3cret-pass"
    assert create_admin(db_session, "owner@example.com", "other") is None
