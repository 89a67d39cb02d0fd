"""Default portfolio content used by the seed script and the in-memory store."""

from __future__ import annotations

from typing import Any


DEFAULT_SECTIONS: dict[str, dict[str, Any]] = {
    "hero": {
        "title": "Assis Medeiros",
        "subtitle": "DevOps Engineer & Cloud Specialist",
        "description": "Automating deployment processes and optimizing cloud infrastructure for scalable applications.",
        "photoUrl": "/uploads/Assis-800.jpg",
        "cvUrl": "/uploads/CV- DevOps.pdf",
    },
    "about": {
        "title": "About Me",
        "paragraphs": [
            "I'm a DevOps Engineer with over 10 years of experience in IT focusing on cloud infrastructure and "
            "automation. I specialize in building robust CI/CD pipelines and implementing infrastructure as code "
            "solutions.",
            "My expertise covers a wide range of technologies including Kubernetes, Docker, Terraform, AWS, Azure, "
            "and GCP. I'm passionate about automating processes and improving development workflows.",
        ],
        "education": "Bachelor's Degree in Systems Analysis",
        "language": "English (Fluent), Portuguese (Native)",
        "location": "São Paulo, Brazil",
        "relocate": "Open to relocation",
        "certifications": [
            {"name": "AWS Certified DevOps Engineer", "issuer": "Amazon Web Services"},
            {"name": "Certified Kubernetes Administrator", "issuer": "Cloud Native Computing Foundation"},
            {"name": "Microsoft Certified: Azure DevOps Engineer", "issuer": "Microsoft"},
        ],
    },
    "contact": {
        "title": "Get In Touch",
        "description": "Feel free to reach out if you're interested in working together or have any questions.",
        "email": "assisberlanda@gmail.com",
        "linkedin": "https://www.linkedin.com/in/assismedeiros/",
        "github": "https://github.com/assisberlanda",
        "location": "São Paulo, Brazil",
        "relocate": "Open to relocation",
        "dioProfile": "https://www.dio.me/users/assisberlanda",
    },
}


def _skill(name: str, category: str, proficiency: int) -> dict[str, Any]:
    return {"name": name, "category": category, "proficiency": proficiency, "is_visible": True}


DEFAULT_SKILLS: list[dict[str, Any]] = [
    _skill("Kubernetes", "DevOps", 90),
    _skill("Docker", "DevOps", 95),
    _skill("Terraform", "DevOps", 85),
    _skill("Jenkins", "DevOps", 80),
    _skill("GitLab CI", "DevOps", 85),
    _skill("GitHub Actions", "DevOps", 80),
    _skill("AWS", "Cloud", 90),
    _skill("Azure", "Cloud", 85),
    _skill("Google Cloud", "Cloud", 75),
    _skill("Python", "Programming", 75),
    _skill("Go", "Programming", 70),
    _skill("Bash", "Programming", 85),
    _skill("JavaScript", "Programming", 65),
    _skill("PostgreSQL", "Database", 70),
    _skill("MongoDB", "Database", 75),
    _skill("Prometheus", "Monitoring", 80),
    _skill("Grafana", "Monitoring", 85),
    _skill("ELK Stack", "Monitoring", 75),
]

DEFAULT_EXPERIENCES: list[dict[str, Any]] = [
    {
        "position": "Senior DevOps Engineer",
        "company": "Cloud Solutions Inc.",
        "description": (
            "Led DevOps practices across multiple teams, implementing CI/CD pipelines that reduced deployment "
            "time by 70%. Migrated legacy infrastructure to Kubernetes, improving scalability and reducing "
            "operational costs by 30%."
        ),
        "start_date": "2020-01",
        "end_date": None,
        "order": 1,
        "is_visible": True,
    },
    {
        "position": "DevOps Engineer",
        "company": "Tech Innovations Ltd.",
        "description": (
            "Implemented infrastructure as code using Terraform and Ansible. Designed and maintained a "
            "microservices architecture using Docker and Kubernetes. Automated deployment processes that "
            "increased release frequency from monthly to weekly."
        ),
        "start_date": "2017-03",
        "end_date": "2019-12",
        "order": 2,
        "is_visible": True,
    },
    {
        "position": "Systems Administrator",
        "company": "Digital Solutions Group",
        "description": (
            "Managed on-premises and cloud infrastructure. Initiated the company's transition to DevOps "
            "methodologies by introducing configuration management and automated deployments."
        ),
        "start_date": "2014-05",
        "end_date": "2017-02",
        "order": 3,
        "is_visible": True,
    },
]

DEFAULT_PROJECTS: list[dict[str, Any]] = [
    {
        "title": "Cloud Migration Framework",
        "description": (
            "Developed a framework for seamlessly migrating legacy applications to cloud environments with "
            "minimal downtime. Includes assessment tools, migration patterns, and automated verification."
        ),
        "repo_url": None,
        "demo_url": None,
        "tags": ["Terraform", "AWS", "Python", "CI/CD"],
        "is_visible": True,
        "is_featured": True,
    },
    {
        "title": "Kubernetes Operator for Database Management",
        "description": (
            "Created a custom Kubernetes operator for automating database provisioning, backup, and scaling "
            "operations. Supports PostgreSQL and MySQL with automated failover capabilities."
        ),
        "repo_url": "https://github.com/assisberlanda/k8s-db-operator",
        "demo_url": None,
        "tags": ["Kubernetes", "Go", "Databases", "Operator SDK"],
        "is_visible": True,
        "is_featured": True,
    },
    {
        "title": "Monitoring Dashboard",
        "description": (
            "Built a comprehensive monitoring solution using Prometheus and Grafana to provide real-time "
            "visibility into application and infrastructure performance."
        ),
        "repo_url": "https://github.com/assisberlanda/monitoring-dashboard",
        "demo_url": None,
        "tags": ["Prometheus", "Grafana", "Monitoring", "Dashboards"],
        "is_visible": True,
        "is_featured": True,
    },
]
