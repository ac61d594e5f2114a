"""Skill vocabulary used by the text scanner."""

COMMON_SKILLS: tuple[str, ...] = (
    "JavaScript", "Python", "React", "Node.js", "MongoDB", "PostgreSQL",
    "AWS", "Docker", "Git", "TypeScript", "Vue.js", "Angular",
    "Express.js", "Django", "Flask", "FastAPI", "GraphQL", "REST API",
    "HTML", "CSS", "SASS", "Bootstrap", "Tailwind CSS", "Redux",
    "Next.js", "Nuxt.js", "Laravel", "Spring Boot", "Java", "C#",
    "PHP", "Ruby", "Go", "Rust", "Swift", "Kotlin", "Flutter",
    "React Native", "TensorFlow", "PyTorch", "Machine Learning",
    "Data Science", "DevOps", "CI/CD", "Kubernetes", "Jenkins",
)
