"""Email content for reminder confirmations and due reminders."""

from html import escape

DEFAULT_PROBLEM_TITLE = "LeetCode Problem"

CONFIRMATION_SUBJECT = "LeetCode Reminder Confirmation"
DUE_REMINDER_SUBJECT = "Time to Review Your LeetCode Problem!"


def _problem_lines(problem_url: str, problem_title: str | None) -> str:
    title = escape(problem_title or DEFAULT_PROBLEM_TITLE)
    url = escape(problem_url, quote=True)
    return f"<p>Problem: {title}</p>\n<p>URL: <a href=\"{url}\">{url}</a></p>"


def format_confirmation_email(
    problem_url: str,
    problem_title: str | None,
    scheduled_for_display: str,
) -> tuple[str, str]:
    """Build the email confirming a reminder was set.

    :param problem_url: URL of the problem.
    :param problem_title: Problem title, or None for the default label.
    :param scheduled_for_display: Formatted due time.
    :returns: Tuple of (subject, html_body).
    """
    body = (
        "<h2>Your LeetCode Reminder has been set!</h2>\n"
        f"{_problem_lines(problem_url, problem_title)}\n"
        f"<p>You will be reminded on: {escape(scheduled_for_display)}</p>\n"
        "<p>Keep coding!</p>"
    )
    return CONFIRMATION_SUBJECT, body


def format_due_reminder_email(problem_url: str, problem_title: str | None) -> tuple[str, str]:
    """Build the email sent when a reminder falls due.

    :param problem_url: URL of the problem.
    :param problem_title: Problem title, or None for the default label.
    :returns: Tuple of (subject, html_body).
    """
    body = (
        "<h2>Time to review your LeetCode problem!</h2>\n"
        f"{_problem_lines(problem_url, problem_title)}\n"
        "<p>Happy coding!</p>"
    )
    return DUE_REMINDER_SUBJECT, body
