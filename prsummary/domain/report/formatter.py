"""Markdown report layout"""

REPORT_TEMPLATE = """# Pull Request Summary

## Branch: {branch}

## Commits:
{commits}

## Changes Overview:
{changes_overview}

# Summary:
{summary}

## Detailed Description:
<!-- Please provide a detailed description of the changes in this PR -->
"""


def format_report(branch: str, commits: str, changes_overview: str, summary: str) -> str:
    """Fill the fixed pull request template"""
    return REPORT_TEMPLATE.format(
        branch=branch,
        commits=commits,
        changes_overview=changes_overview,
        summary=summary,
    )
