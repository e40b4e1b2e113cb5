"""
Sample report payloads for tests and local development.
"""

from copy import deepcopy

from core.rubric import END_OF_TERM_QUESTIONS

WEEKLY_PAYLOAD = {
    'student_name': 'Jane Doe',
    'student_id': 103456789,
    'organisation': 'Acme Pty Ltd',
    'industry_supervisor': 'Sam Lee',
    'date_prepared': '2024-06-28',
    'week_number': 3,
    'plans_for_next_week': 'Finish the reporting dashboard.',
    'total_hours': 12.5,
    'tasks': [
        {'day': 1, 'date': '2024-06-24', 'description': 'Set up the development environment', 'hours_spent': 4},
        {'day': 2, 'date': '2024-06-25', 'description': 'Reviewed the data model', 'hours_spent': 8.5},
    ],
}

END_OF_TERM_PAYLOAD = {
    'student_name': 'Jane Doe',
    'student_id': 103456789,
    'organisation': 'Acme Pty Ltd',
    'industry_supervisor': 'Sam Lee',
    'date_of_submit': '2024-10-25',
    'student_comments': 'I learned a lot about working in a product team.',
    'supervisor_comments': 'Jane contributed to two releases.',
    'student_signature': 'Jane Doe',
    'student_signature_date': '2024-10-24',
    'score_items': [
        {'question': question, 'score': score}
        for question, score in zip(END_OF_TERM_QUESTIONS, (5, 4, 3, 4, 2))
    ],
}


def weekly_payload(**overrides):
    """A valid weekly report payload with the given fields replaced."""
    payload = deepcopy(WEEKLY_PAYLOAD)
    payload.update(overrides)
    return payload


def end_of_term_payload(**overrides):
    """A valid end-of-term report payload with the given fields replaced."""
    payload = deepcopy(END_OF_TERM_PAYLOAD)
    payload.update(overrides)
    return payload
