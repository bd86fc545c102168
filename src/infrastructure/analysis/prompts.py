"""
Prompt templates for language-model analysis backends
"""
import json
from typing import Optional

from domain.entities.analysis import AnalysisContext, AnalysisResponse
from domain.entities.statement_summary import StatementSummary


SYSTEM_PROMPT = """You are a financial analysis expert assistant. You have access to a user's bank statement data and should provide insightful, accurate, and actionable financial advice."""

FINANCIAL_DEFINITIONS = """FINANCIAL DEFINITIONS:
- Income: Positive amounts (deposits, salary, refunds, etc.)
- Expenses: Negative amounts (purchases, withdrawals, fees, etc.)
- Categories: Transactions are grouped into spending categories (Food, Transport, Entertainment, etc.)
- Cash Flow: The movement of money in and out of the account
- Net Position: Total income minus total expenses over the period"""

ANALYSIS_GUIDELINES = """ANALYSIS GUIDELINES:
1. Provide specific insights based on the actual data
2. Compare spending patterns across categories
3. Identify unusual transactions or spending spikes
4. Suggest actionable improvements
5. Use percentages and concrete numbers from the data
6. Be concise but comprehensive in your analysis"""

RESPONSE_FORMAT = """Reply with a single JSON object and nothing else:
{"response": "<one paragraph answer>", "insights": ["<most important insight>", "..."]}"""

CONTEXT_TEMPLATE = """CONTEXT:
- Statement file: {file_name}
- Total balance: ${total:.2f}
- Number of transactions: {count}
- Date range: {first_date} to {last_date}

STATEMENT DATA:
{statement_data}

{definitions}

{guidelines}

USER QUERY: {query}

Please analyze the statement data and provide insights relevant to the user's question. Include specific numbers, trends, and actionable recommendations."""


def format_statement_summary(summary: StatementSummary) -> str:
    """
    Render a summary as the plain-text data block of a prompt.
    
    Args:
        summary: Statement summary
        
    Returns:
        Multi-line text with totals, categories and recent transactions
    """
    lines = [
        f"Total Income: ${summary.total_income:.2f}",
        f"Total Expenses: ${summary.total_expenses:.2f}",
        f"Net Cash Flow: ${summary.net_cash_flow:.2f}",
        "",
        "SPENDING BY CATEGORY:",
    ]
    for category, total in summary.sorted_categories():
        lines.append(f"- {category}: ${total:.2f}")

    lines.append("")
    lines.append("RECENT TRANSACTIONS:")
    for row in summary.recent_rows:
        lines.append(f"{row.date} | {row.description} | ${row.amount:.2f} | {row.category_label}")

    return "\n".join(lines)


def create_prompt(
    context: AnalysisContext,
    include_format: bool = False,
    include_system: bool = True
) -> str:
    """
    Create the complete analysis prompt for a context.

    Args:
        context: Structured query context
        include_format: Append JSON reply instructions (for model backends)
        include_system: Prefix SYSTEM_PROMPT. Backends that pass it as a
            separate system message render without it.

    Returns:
        Prompt text
    """
    prompt = CONTEXT_TEMPLATE.format(
        file_name=context.file_name,
        total=context.total,
        count=context.transaction_count,
        first_date=context.first_date,
        last_date=context.last_date,
        statement_data=format_statement_summary(context.summary),
        definitions=FINANCIAL_DEFINITIONS,
        guidelines=ANALYSIS_GUIDELINES,
        query=context.query,
    )
    if include_system:
        prompt = f"{SYSTEM_PROMPT}\n\n{prompt}"
    if include_format:
        prompt = f"{prompt}\n\n{RESPONSE_FORMAT}"
    return prompt


def parse_model_reply(text: str) -> Optional[AnalysisResponse]:
    """
    Parse a model reply into an AnalysisResponse.

    A JSON object with a ``response`` key is used as-is. Any other
    non-empty text becomes the response with no insights.

    Args:
        text: Raw model output

    Returns:
        AnalysisResponse, or None if the reply is empty
    """
    text = text.strip()
    if not text:
        return None

    # Models often wrap JSON in a fenced code block
    if text.startswith("```"):
        text = text.strip("`")
        if text.startswith("json"):
            text = text[4:]
        text = text.strip()

    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return AnalysisResponse(response=text)

    if not isinstance(payload, dict) or "response" not in payload:
        return AnalysisResponse(response=text)

    insights = payload.get("insights") or []
    if not isinstance(insights, list):
        insights = [insights]

    return AnalysisResponse(
        response=str(payload["response"]),
        insights=[str(i) for i in insights]
    )
