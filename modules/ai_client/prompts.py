from __future__ import annotations

from typing import List

from .types import SYSTEM, USER, ChatMessage

TEST_STEPS_SYSTEM_PROMPT = """You are an expert test automation engineer specializing in Playwright test generation.
Given HTML content and a test objective, generate specific Playwright test steps.
Return only the steps as a JSON array of strings with valid Playwright syntax.

Focus on:
- Valid CSS selectors and locators
- Proper async/await syntax
- Clear assertions using expect()
- Realistic test scenarios
- Error handling considerations"""

PAGE_ANALYSIS_SYSTEM_PROMPT = """You are an expert web analyzer and test strategist.
Analyze HTML structure and provide comprehensive insights about:
- Page layout and key sections
- Interactive elements (forms, buttons, links)
- Navigation patterns
- Accessibility considerations
- Potential testing strategies and edge cases
- Performance considerations

Provide actionable insights that can guide test creation."""

TEST_CODE_SYSTEM_PROMPT = """You are an expert Playwright test code generator.
Generate complete, runnable Playwright test code with:
- Proper TypeScript syntax
- Import statements for @playwright/test
- Describe blocks for organization
- Multiple test cases covering different scenarios
- Proper error handling
- Realistic selectors based on the HTML
- Clear test descriptions
- Assertions that verify expected behavior"""


def build_test_steps_messages(page_content: str, test_objective: str) -> List[ChatMessage]:
    return [
        ChatMessage(role=SYSTEM, content=TEST_STEPS_SYSTEM_PROMPT),
        ChatMessage(
            role=USER,
            content=(
                f"HTML Content: {page_content}\n\n"
                f"Test Objective: {test_objective}\n\n"
                "Generate specific Playwright test steps to achieve this objective. "
                "Return as a JSON array of strings."
            ),
        ),
    ]


def build_page_analysis_messages(page_content: str) -> List[ChatMessage]:
    return [
        ChatMessage(role=SYSTEM, content=PAGE_ANALYSIS_SYSTEM_PROMPT),
        ChatMessage(
            role=USER,
            content=f"Analyze this HTML content and provide detailed insights for test planning:\n\n{page_content}",
        ),
    ]


def build_test_code_messages(page_content: str, test_objective: str, page_name: str) -> List[ChatMessage]:
    return [
        ChatMessage(role=SYSTEM, content=TEST_CODE_SYSTEM_PROMPT),
        ChatMessage(
            role=USER,
            content=(
                "Generate complete Playwright test code for:\n\n"
                f"Page Name: {page_name}\n"
                f"Test Objective: {test_objective}\n"
                f"HTML Content: {page_content}\n\n"
                "Return only the TypeScript test code without any explanation."
            ),
        ),
    ]
