from pydantic import BaseModel, Field


class SampleJob(BaseModel):
    title: str
    company: str
    location: str = "Remote"
    type: str = "full-time"
    description: str
    skills: list[str] = Field(default_factory=list)
    budget_min: float
    budget_max: float


SAMPLE_EMPLOYER_EMAIL = "employer@test.com"
SAMPLE_EMPLOYER_PASSWORD = "password123"

SAMPLE_JOBS: tuple[SampleJob, ...] = (
    SampleJob(
        title="Senior React Developer",
        company="TechCorp Inc.",
        location="San Francisco, CA",
        description=(
            "We are looking for a senior React developer with 5+ years of experience building scalable web "
            "applications. Must have strong knowledge of React, TypeScript, and modern JavaScript frameworks."
        ),
        skills=["React", "TypeScript", "JavaScript", "Node.js", "MongoDB", "AWS"],
        budget_min=120000,
        budget_max=180000,
    ),
    SampleJob(
        title="Full Stack Developer",
        company="StartupXYZ",
        location="New York, NY",
        description=(
            "Join our fast-growing startup as a full stack developer. You will work on both frontend and "
            "backend development using modern technologies."
        ),
        skills=["JavaScript", "React", "Node.js", "Express.js", "MongoDB", "PostgreSQL"],
        budget_min=80000,
        budget_max=120000,
    ),
    SampleJob(
        title="Python Backend Developer",
        company="DataTech Solutions",
        location="Austin, TX",
        description=(
            "We need a Python backend developer to work on our data processing platform. Experience with "
            "Django, FastAPI, and cloud services required."
        ),
        skills=["Python", "Django", "FastAPI", "PostgreSQL", "AWS", "Docker"],
        budget_min=90000,
        budget_max=140000,
    ),
    SampleJob(
        title="Frontend Developer (React)",
        company="WebDesign Pro",
        type="contract",
        description=(
            "Remote contract position for a React frontend developer. Must have experience with modern React "
            "patterns and state management."
        ),
        skills=["React", "JavaScript", "CSS", "HTML", "Redux", "Git"],
        budget_min=60000,
        budget_max=90000,
    ),
    SampleJob(
        title="DevOps Engineer",
        company="CloudFirst Inc.",
        location="Seattle, WA",
        description=(
            "Join our DevOps team to manage cloud infrastructure and CI/CD pipelines. Experience with AWS, "
            "Docker, and Kubernetes required."
        ),
        skills=["AWS", "Docker", "Kubernetes", "Jenkins", "Terraform", "Linux"],
        budget_min=100000,
        budget_max=150000,
    ),
    SampleJob(
        title="Mobile App Developer",
        company="AppStudio",
        location="Los Angeles, CA",
        description=(
            "Develop mobile applications using React Native. Must have experience with mobile development and "
            "app store deployment."
        ),
        skills=["React Native", "JavaScript", "iOS", "Android", "Firebase", "Git"],
        budget_min=85000,
        budget_max=130000,
    ),
    SampleJob(
        title="Machine Learning Engineer",
        company="AITech Solutions",
        location="Boston, MA",
        description=(
            "Work on cutting-edge machine learning projects. Experience with Python, TensorFlow, and data "
            "science required."
        ),
        skills=["Python", "TensorFlow", "Machine Learning", "Data Science", "SQL", "AWS"],
        budget_min=110000,
        budget_max=170000,
    ),
    SampleJob(
        title="UI/UX Designer",
        company="DesignHub",
        location="Chicago, IL",
        description=(
            "Create beautiful and intuitive user interfaces. Must have experience with design tools and user "
            "research."
        ),
        skills=["Figma", "Adobe Creative Suite", "User Research", "Prototyping", "HTML", "CSS"],
        budget_min=70000,
        budget_max=110000,
    ),
    SampleJob(
        title="Database Administrator",
        company="DataSystems Corp",
        location="Dallas, TX",
        description=(
            "Manage and optimize our database systems. Experience with PostgreSQL, MySQL, and performance "
            "tuning required."
        ),
        skills=["PostgreSQL", "MySQL", "Database Administration", "Performance Tuning", "Backup", "Security"],
        budget_min=80000,
        budget_max=120000,
    ),
    SampleJob(
        title="QA Engineer",
        company="QualityAssurance Pro",
        type="contract",
        description=(
            "Ensure software quality through comprehensive testing. Experience with automated testing and test "
            "frameworks required."
        ),
        skills=["Selenium", "Jest", "Cypress", "Manual Testing", "Test Automation", "Git"],
        budget_min=65000,
        budget_max=95000,
    ),
)


def load_sample_jobs() -> list[SampleJob]:
    return list(SAMPLE_JOBS)
