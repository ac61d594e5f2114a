from __future__ import annotations

import argparse

from jobnet.config import build_sqlalchemy_db_url, settings
from jobnet.data import SAMPLE_EMPLOYER_EMAIL, SAMPLE_EMPLOYER_PASSWORD, load_sample_jobs
from jobnet.database import Base, SessionLocal, engine
import jobnet.models  # noqa: F401  # ensure all models are registered
from jobnet.models.job import Job
from jobnet.models.user import User
from jobnet.utils.password_hash import hash_password


def _ensure_tables() -> None:
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Insert the bundled sample jobs under a demo employer account.")
    parser.add_argument("--employer-email", default=SAMPLE_EMPLOYER_EMAIL)
    parser.add_argument(
        "--replace",
        action="store_true",
        help="Delete the employer's existing jobs before seeding",
    )
    args = parser.parse_args(argv)

    _ensure_tables()

    with SessionLocal() as db:
        employer = db.query(User).filter(User.email == args.employer_email).first()
        if employer is None:
            employer = User(
                email=args.employer_email,
                password=hash_password(SAMPLE_EMPLOYER_PASSWORD),
                name="Test Employer",
                bio="Sample employer for demo jobs",
                skills=[],
            )
            db.add(employer)
            db.flush()
            print(f"created employer id={employer.id} email={employer.email}")

        if args.replace:
            removed = 0
            for job in db.query(Job).filter(Job.employer_id == employer.id).all():
                db.delete(job)
                removed += 1
            print(f"removed {removed} existing jobs")

        samples = load_sample_jobs()
        for sample in samples:
            db.add(
                Job(
                    title=sample.title,
                    description=sample.description,
                    company=sample.company,
                    location=sample.location,
                    type=sample.type,
                    skills=list(sample.skills),
                    tags=[],
                    budget_min=sample.budget_min,
                    budget_max=sample.budget_max,
                    budget_currency="USD",
                    employer_id=employer.id,
                    payment_verified=True,
                )
            )
        db.commit()

    print(f"seeded {len(samples)} jobs for {args.employer_email}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
