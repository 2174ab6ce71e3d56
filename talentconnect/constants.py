# talentconnect/constants.py
from typing import NamedTuple, Tuple

# delimiters accepted in free-text skill input ("react, node; aws|docker")
SKILL_DELIMITERS = r"[,;|\n]"

# literal markers the persistence layer stores for "no skills"
EMPTY_SKILL_MARKERS = {"", "[]", "null"}

AVAILABLE = "available"
BUSY = "busy"
AVAILABILITY_VALUES = (AVAILABLE, BUSY)

# skill -> related skills (ecosystem neighbours); lookups are made symmetric
# in utils/similarity.py, so each pair only needs to be listed once
RELATED_SKILLS = {
    "react": {"javascript", "js", "jsx", "frontend", "web development", "next", "nextjs"},
    "vue": {"javascript", "js", "frontend", "web development", "nuxt"},
    "angular": {"typescript", "javascript", "js", "frontend", "web development"},
    "node": {"javascript", "js", "backend", "server", "express"},
    "nodejs": {"javascript", "js", "backend", "server", "express"},
    "python": {"django", "flask", "fastapi", "backend", "data science", "machine learning", "ai"},
    "java": {"spring", "backend", "enterprise", "springboot"},
    "typescript": {"javascript", "js", "react", "angular", "node"},
    "css": {"html", "frontend", "web development", "sass", "scss", "tailwind"},
    "html": {"css", "frontend", "web development"},
    "sql": {"database", "mysql", "postgresql", "mongodb"},
    "aws": {"cloud", "devops", "infrastructure", "ec2", "s3"},
    "docker": {"devops", "containerization", "kubernetes"},
    "git": {"version control", "github", "gitlab"},
    "mongodb": {"database", "nosql", "mongoose"},
    "mysql": {"database", "sql", "relational"},
    "postgresql": {"database", "sql", "relational"},
    "redis": {"cache", "database", "memory"},
    "graphql": {"api", "query language", "apollo"},
    "rest": {"api", "web service", "http"},
    "sass": {"css", "scss", "styling"},
    "scss": {"css", "sass", "styling"},
    "tailwind": {"css", "utility", "styling"},
    "bootstrap": {"css", "framework", "responsive"},
}


class Category(NamedTuple):
    name: str
    keywords: Tuple[str, ...]
    icon: str


OTHERS = "Others"

# order matters: the first category with a keyword hit wins
CATEGORY_TAXONOMY: Tuple[Category, ...] = (
    Category("Frontend Developer", (
        "frontend", "front-end", "front end", "react", "vue", "angular", "javascript",
        "html", "css", "ui developer", "web developer", "jsx", "typescript",
    ), "Code"),
    Category("Backend Developer", (
        "backend", "back-end", "back end", "node", "nodejs", "python", "java", "php",
        "api", "server", "database", "django", "flask", "spring",
    ), "Database"),
    Category("Full Stack Developer", (
        "fullstack", "full-stack", "full stack", "mern", "mean", "lamp", "stack",
    ), "Layers"),
    Category("Data Engineer", (
        "data engineer", "data engineering", "etl", "data pipeline", "big data",
        "hadoop", "spark", "airflow", "kafka",
    ), "Database"),
    Category("Data Analyst", (
        "data analyst", "data analysis", "analyst", "business analyst", "reporting",
        "dashboard", "excel", "tableau", "power bi",
    ), "BarChart"),
    Category("Data Scientist", (
        "data scientist", "data science", "machine learning", "ml", "ai",
        "artificial intelligence", "analytics", "statistics",
    ), "TrendingUp"),
    Category("DevOps Engineer", (
        "devops", "dev ops", "docker", "kubernetes", "aws", "azure", "gcp", "jenkins",
        "ci/cd", "terraform", "ansible",
    ), "Settings"),
    Category("Cloud Engineer", (
        "cloud", "aws", "azure", "gcp", "google cloud", "cloud architect",
        "cloud developer", "ec2", "s3", "lambda",
    ), "Settings"),
    Category("Mobile Developer", (
        "mobile", "ios", "android", "react native", "flutter", "swift", "kotlin",
        "app developer",
    ), "Smartphone"),
    Category("QA Engineer", (
        "qa", "quality assurance", "testing", "test", "automation", "selenium",
        "tester", "manual testing", "test engineer",
    ), "CheckCircle"),
    Category("UI/UX Designer", (
        "ui", "ux", "designer", "design", "figma", "sketch", "adobe",
        "user experience", "user interface", "graphic",
    ), "Palette"),
    Category("Product Manager", (
        "product manager", "product management", "pm", "product owner",
        "scrum master", "agile", "product lead",
    ), "Users"),
    Category("Software Engineer", (
        "software engineer", "software developer", "programmer", "coding",
        "development", "engineer",
    ), "Code"),
    Category(OTHERS, (), "User"),
)

# coarse salary brackets: any listed fragment appearing in the salary text matches
SALARY_BRACKETS = {
    "entry": ("20", "30", "40"),
    "mid": ("50", "60", "70"),
    "senior": ("70", "80", "90", "100"),
    "expert": ("100", "120", "150"),
}
