from __future__ import annotations

import argparse

from sqlalchemy import and_

from jobnet.config import build_sqlalchemy_db_url, settings
from jobnet.database import SessionLocal, mask_db_url
import jobnet.models  # noqa: F401  # ensure all models are registered
from jobnet.models.job import Job
from jobnet.models.user import User


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Report jobs whose employer is missing (legacy rows) and optionally deactivate them."
    )
    parser.add_argument("--deactivate", action="store_true", help="Mark orphaned jobs inactive")
    args = parser.parse_args(argv)

    print(f"db_url={mask_db_url(build_sqlalchemy_db_url(settings))}")

    with SessionLocal() as db:
        total = db.query(Job).count()
        no_employer = db.query(Job).filter(Job.employer_id.is_(None)).all()
        dangling = (
            db.query(Job)
            .outerjoin(User, User.id == Job.employer_id)
            .filter(and_(Job.employer_id.isnot(None), User.id.is_(None)))
            .all()
        )

        print(f"total jobs: {total}")
        print(f"jobs without employer: {len(no_employer)}")
        for job in no_employer:
            print(f"- job id={job.id} title={job.title!r}")
        print(f"jobs whose employer no longer exists: {len(dangling)}")
        for job in dangling:
            print(f"- job id={job.id} title={job.title!r} employer_id={job.employer_id}")

        orphans = no_employer + dangling
        if args.deactivate and orphans:
            for job in orphans:
                job.is_active = False
            db.commit()
            print(f"deactivated {len(orphans)} jobs")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
