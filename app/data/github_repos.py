from __future__ import annotations

from typing import Any


# Served by /github/repos when no GITHUB_TOKEN is configured or GitHub is unreachable.
FALLBACK_REPOS: list[dict[str, Any]] = [
    {
        "id": 956542314,
        "name": "docker-compose-collection",
        "html_url": "https://github.com/assisberlanda/docker-compose-collection",
        "description": (
            "Uma coleção de arquivos Docker Compose para configurar rapidamente ambientes de desenvolvimento "
            "e aplicações comuns."
        ),
        "language": "YAML",
        "stargazers_count": 12,
        "forks_count": 5,
        "topics": ["docker", "devops", "containers"],
    },
    {
        "id": 956542315,
        "name": "kubernetes-templates",
        "html_url": "https://github.com/assisberlanda/kubernetes-templates",
        "description": "Templates para implantação de aplicações em clusters Kubernetes.",
        "language": "YAML",
        "stargazers_count": 8,
        "forks_count": 3,
        "topics": ["kubernetes", "devops", "containers"],
    },
    {
        "id": 956542316,
        "name": "terraform-azure-modules",
        "html_url": "https://github.com/assisberlanda/terraform-azure-modules",
        "description": "Módulos Terraform para provisionamento de infraestrutura na Azure.",
        "language": "HCL",
        "stargazers_count": 15,
        "forks_count": 7,
        "topics": ["terraform", "azure", "iac", "devops"],
    },
]
