"""Prompt templates for the model-backed stages."""


ANALYSIS_PROMPT = """
Analyze the following GitHub repository based on the provided information and key files. Provide a comprehensive analysis including:

1. Project Overview: What does this project do?
2. Technology Stack: What technologies and frameworks are used?
3. Architecture: How is the project structured?
4. Key Features: What are the main features?
5. Code Quality: Any observations about code organization and best practices?
6. Potential Improvements: Suggestions for enhancement

Repository Name: {name}
Description: {description}
Primary Language: {language}
Topics: {topics}

Key Files:
{files}

Please provide a detailed, professional analysis.
"""


FILE_SUMMARY_PROMPT = """
You are a senior developer. Summarize this file for documentation purposes.

Focus on:
- Purpose of the file
- Key functions/classes/components
- If it's config, note what it configures
- If it's server/API code, extract endpoints
- Tech/framework hints

File: {name}
Content:
```
{content}
```
"""


README_PROMPT = """
You are an expert technical writer. Generate a **unique, professional README.md**.

Project Info:
- Name: {name}
- Description: {description}
- Primary Language: {language}
- Topics: {topics}

Repository Analysis:
{summary}

Instructions:
1. Write a clear project title + description.
2. Extract **real features** from the summarized codebase.
3. List technologies and dependencies (from package.json, requirements.txt, Dockerfile, etc.).
4. Add **installation & usage** instructions tailored to detected stack.
5. Document **API endpoints** if any are detected.
6. Show project structure with explanations of major files/folders.
7. Add deployment steps (Docker, Vercel, etc. if relevant).
8. Suggest badges (license, build, npm, etc.).
9. Output must be pure Markdown, no extra text.

Final Output: A professional README.md
"""
