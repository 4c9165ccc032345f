"""Tests for repodoc.agents: analysis, README writing and the template fallback."""

import pytest

from repodoc.agents.analyst import ANALYSIS_PLACEHOLDER, AnalysisAgent
from repodoc.agents.fallback import build_fallback_readme
from repodoc.agents.orchestrator import Orchestrator
from repodoc.agents.readme_writer import (
    EMPTY_FILE_NOTE,
    FAILED_FILE_NOTE,
    ReadmeAgent,
)
from repodoc.models.schemas import AnalysisResult, FileWithContent, RepositoryMetadata
from tests.fakes import StubLLM


def make_file(name: str, content: str = "x") -> FileWithContent:
    return FileWithContent(name=name, path=name, content=content)


@pytest.fixture
def metadata():
    return RepositoryMetadata(
        name="demo",
        description="A demo project",
        language="Python",
        topics=["cli", "docs"],
    )


@pytest.fixture
def demo_analysis():
    return AnalysisResult(
        name="demo",
        description="",
        language="TypeScript",
        topics=[],
        files=[make_file("package.json", "{}"), make_file("Dockerfile", "FROM node")],
        analysis="",
    )


# ── AnalysisAgent ────────────────────────────────────────────────────────────


class TestAnalysisAgent:
    @pytest.mark.asyncio
    async def test_returns_model_text_verbatim(self, metadata):
        llm = StubLLM(reply="  **Overview**\nRaw text  ")
        result = await AnalysisAgent(llm).analyze(metadata, [make_file("README.md")])
        assert result.success
        assert result.data == "  **Overview**\nRaw text  "

    @pytest.mark.asyncio
    async def test_failure_is_reported_not_raised(self, metadata, failing_llm):
        result = await AnalysisAgent(failing_llm).analyze(metadata, [])
        assert not result.success
        assert result.value_or(ANALYSIS_PLACEHOLDER) == ANALYSIS_PLACEHOLDER

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_reported(self, metadata):
        class Broken:
            async def generate(self, prompt, system_prompt=None):
                raise RuntimeError("socket closed")

        result = await AnalysisAgent(Broken()).analyze(metadata, [])
        assert not result.success
        assert "socket closed" in result.error

    @pytest.mark.asyncio
    async def test_idempotent_with_deterministic_stub(self, metadata):
        files = [make_file("README.md", "# demo\n" * 50), make_file("package.json", "{}")]
        first = await AnalysisAgent(StubLLM()).analyze(metadata, files)
        second = await AnalysisAgent(StubLLM()).analyze(metadata, files)
        assert first.data == second.data

    def test_prompt_contents(self, metadata):
        prompt = AnalysisAgent(StubLLM()).build_prompt(
            metadata, [make_file("README.md", "hello")]
        )
        assert "Repository Name: demo" in prompt
        assert "Description: A demo project" in prompt
        assert "Primary Language: Python" in prompt
        assert "Topics: cli, docs" in prompt
        assert "File: README.md\nContent:\nhello" in prompt

    def test_prompt_defaults(self):
        meta = RepositoryMetadata(name="bare")
        prompt = AnalysisAgent(StubLLM()).build_prompt(meta, [])
        assert "Description: No description" in prompt
        assert "Topics: None" in prompt

    def test_content_truncated(self, metadata):
        body = "a" * 1000 + "TAIL"
        prompt = AnalysisAgent(StubLLM()).build_prompt(metadata, [make_file("big.md", body)])
        assert "a" * 1000 in prompt
        assert "TAIL" not in prompt

    def test_content_budget_configurable(self, metadata):
        prompt = AnalysisAgent(StubLLM(), content_chars=5).build_prompt(
            metadata, [make_file("big.md", "abcdefghij")]
        )
        assert "abcde" in prompt
        assert "abcdef" not in prompt


# ── ReadmeAgent Phase A ──────────────────────────────────────────────────────


class TestFileSummaries:
    @pytest.mark.asyncio
    async def test_empty_file_skips_model(self):
        llm = StubLLM()
        line = await ReadmeAgent(llm).summarize_file(make_file("empty.md", ""))
        assert line == f"- empty.md: {EMPTY_FILE_NOTE}"
        assert llm.prompts == []

    @pytest.mark.asyncio
    async def test_failed_file(self, failing_llm):
        line = await ReadmeAgent(failing_llm).summarize_file(make_file("a.json", "{}"))
        assert line == f"- a.json: {FAILED_FILE_NOTE}"

    @pytest.mark.asyncio
    async def test_summary_line(self):
        line = await ReadmeAgent(StubLLM(reply="Configures the build")).summarize_file(
            make_file("package.json", "{}")
        )
        assert line == "- package.json: Configures the build"

    @pytest.mark.asyncio
    async def test_block_is_one_line_per_file_in_order(self):
        files = [make_file("a.md", ""), make_file("b.md", "text"), make_file("c.md", "")]
        block = await ReadmeAgent(StubLLM(reply="S")).summarize_files(files)
        assert block.split("\n") == [
            f"- a.md: {EMPTY_FILE_NOTE}",
            "- b.md: S",
            f"- c.md: {EMPTY_FILE_NOTE}",
        ]

    @pytest.mark.asyncio
    async def test_concurrent_summaries_keep_order(self):
        files = [make_file(f"f{i}.md", f"body {i}") for i in range(6)]
        block = await ReadmeAgent(StubLLM(reply="ok"), summary_concurrency=3).summarize_files(files)
        assert [line.split(":")[0] for line in block.split("\n")] == [f"- f{i}.md" for i in range(6)]

    @pytest.mark.asyncio
    async def test_sequential_by_default(self):
        llm = StubLLM(reply="ok")
        files = [make_file(f"f{i}.md", f"body {i}") for i in range(3)]
        await ReadmeAgent(llm).summarize_files(files)
        assert [p.count(f"body {i}") for i, p in enumerate(llm.prompts)] == [1, 1, 1]


# ── ReadmeAgent Phase B ──────────────────────────────────────────────────────


class TestReadmeGeneration:
    @pytest.mark.asyncio
    async def test_model_readme_returned_verbatim(self, demo_analysis):
        readme = await ReadmeAgent(StubLLM(reply="# Demo\n\nGenerated")).generate(demo_analysis)
        assert readme == "# Demo\n\nGenerated"

    @pytest.mark.asyncio
    async def test_synthesis_prompt_includes_summaries(self, demo_analysis):
        llm = StubLLM(reply="summary")
        await ReadmeAgent(llm).generate(demo_analysis)
        synthesis = llm.prompts[-1]
        assert "- Name: demo" in synthesis
        assert "- Description: No description provided" in synthesis
        assert "- Topics: Not specified" in synthesis
        assert "- package.json: summary" in synthesis
        assert "- Dockerfile: summary" in synthesis

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_template(self, demo_analysis, failing_llm):
        readme = await ReadmeAgent(failing_llm).generate(demo_analysis)
        assert readme == build_fallback_readme(demo_analysis)

    @pytest.mark.asyncio
    async def test_fallback_is_deterministic(self, demo_analysis):
        first = await ReadmeAgent(StubLLM(fail=True)).generate(demo_analysis)
        second = await ReadmeAgent(StubLLM(fail=True)).generate(demo_analysis)
        assert first == second


# ── build_fallback_readme ────────────────────────────────────────────────────


class TestFallbackReadme:
    def test_demo_scenario(self, demo_analysis):
        readme = build_fallback_readme(demo_analysis)
        assert "## Installation\n\n```bash\nnpm install\nnpm run dev\n```" in readme
        assert "## Docker" in readme
        assert "docker build -t demo ." in readme
        assert "docker run -p 3000:3000 demo" in readme
        assert "- Dockerized setup supported" in readme
        assert readme.endswith("## License\n\nMIT License.\n")

    def test_exact_layout(self):
        analysis = AnalysisResult(
            name="Tool",
            description="Does things",
            language="Python",
            topics=["a", "b"],
            files=[make_file("requirements.txt"), make_file("api_routes.md")],
        )
        assert build_fallback_readme(analysis) == (
            "# Tool\n\nDoes things\n\n"
            "## Features\n\n"
            "- Written in Python\n"
            "- Topics: a, b\n"
            "- Provides API endpoints\n"
            "\n## Project Structure\n\n```\n"
            "requirements.txt\n"
            "api_routes.md\n"
            "```\n\n"
            "## Installation\n\n```bash\npip install -r requirements.txt\npython app.py\n```\n\n"
            "## License\n\nMIT License.\n"
        )

    def test_both_manifests_emit_two_installation_sections(self):
        analysis = AnalysisResult(
            name="mixed",
            files=[make_file("package.json"), make_file("requirements.txt")],
        )
        readme = build_fallback_readme(analysis)
        assert readme.count("## Installation") == 2
        assert "npm install" in readme
        assert "pip install -r requirements.txt" in readme

    def test_empty_analysis_has_safe_defaults(self):
        readme = build_fallback_readme(AnalysisResult())
        assert readme.startswith("# Project\n\n\n\n")
        assert "- Written in various languages" in readme
        assert "## Installation" not in readme
        assert "## Docker" not in readme
        assert "```\n```" in readme

    def test_docker_image_name_defaults_to_app(self):
        readme = build_fallback_readme(AnalysisResult(files=[make_file("Dockerfile")]))
        assert "docker build -t app ." in readme

    def test_docker_image_name_lowercased(self):
        readme = build_fallback_readme(
            AnalysisResult(name="MyService", files=[make_file("Dockerfile")])
        )
        assert "docker build -t myservice ." in readme
        assert readme.startswith("# MyService\n")

    def test_route_file_detected(self):
        readme = build_fallback_readme(AnalysisResult(name="x", files=[make_file("router.yml")]))
        assert "- Provides API endpoints" in readme

    def test_dockerfile_match_is_exact(self):
        readme = build_fallback_readme(AnalysisResult(name="x", files=[make_file("dockerfile")]))
        assert "Dockerized" not in readme
        assert "## Docker" not in readme


# ── Orchestrator ─────────────────────────────────────────────────────────────


class TestOrchestratorReadme:
    @pytest.mark.asyncio
    async def test_generate_readme_delegates(self, demo_analysis):
        orchestrator = Orchestrator(StubLLM(reply="# README"))
        assert await orchestrator.generate_readme(demo_analysis) == "# README"
