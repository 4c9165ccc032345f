"""
Template README - Built from file hints alone, without any network call.
"""

from typing import List, Optional

from repodoc.models.schemas import AnalysisResult, FileWithContent


def _has_file(files: List[FileWithContent], name: str) -> bool:
    return any(f.name == name for f in files)


def build_fallback_readme(analysis: AnalysisResult) -> str:
    """
    Render a basic README for ``analysis``.

    The same input always yields the same text.
    """
    name: Optional[str] = analysis.name
    files = analysis.files
    image = name.lower() if name else "app"

    readme = f"# {name or 'Project'}\n\n{analysis.description or ''}\n\n"

    readme += f"## Features\n\n- Written in {analysis.language or 'various languages'}\n"
    if analysis.topics:
        readme += f"- Topics: {', '.join(analysis.topics)}\n"
    if _has_file(files, "Dockerfile"):
        readme += "- Dockerized setup supported\n"
    if any("api" in f.name or "route" in f.name for f in files):
        readme += "- Provides API endpoints\n"

    readme += "\n## Project Structure\n\n```\n"
    for f in files:
        readme += f"{f.name}\n"
    readme += "```\n\n"

    if _has_file(files, "package.json"):
        readme += "## Installation\n\n```bash\nnpm install\nnpm run dev\n```\n\n"
    if _has_file(files, "requirements.txt"):
        readme += "## Installation\n\n```bash\npip install -r requirements.txt\npython app.py\n```\n\n"
    if _has_file(files, "Dockerfile"):
        readme += (
            f"## Docker\n\n```bash\ndocker build -t {image} .\n"
            f"docker run -p 3000:3000 {image}\n```\n\n"
        )

    readme += "## License\n\nMIT License.\n"

    return readme
