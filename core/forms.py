"""
Forms for report payload validation.

These forms hold the field rules for both report kinds. The numeric and date
bounds are kept in RULES so the HTML templates render the same limits as
``min``/``max`` attributes that the server enforces here.
"""

from datetime import date

from django import forms
from django.utils import timezone

from .rubric import END_OF_TERM_QUESTIONS, MIN_SCORE, MAX_SCORE


MIN_DATE = date(1900, 1, 1)

RULES = {
    'student_id': {'min': 1},
    'week_number': {'min': 1, 'max': 12},
    'day': {'min': 1, 'max': 7},
    'hours_spent': {'min': 0.5, 'max': 24},
    'score': {'min': MIN_SCORE, 'max': MAX_SCORE},
    'total_hours': {'min': 0},
    'tasks': {'min_count': 1},
    'score_items': {'count': len(END_OF_TERM_QUESTIONS)},
    'date': {'min': MIN_DATE},
}


def _required(message):
    return {'required': message}


class CalendarDateField(forms.DateField):
    """
    DateField for JSON as well as form input.

    Only ISO strings and dates are parsed; numbers, lists and other JSON
    values are invalid rather than handed to the string parser.
    """

    def to_python(self, value):
        if value not in self.empty_values and not isinstance(value, (str, date)):
            raise forms.ValidationError(self.error_messages['invalid'], code='invalid')
        return super().to_python(value)


class CalendarDateMixin:
    """
    Shared date bounds for report forms.

    Dates may not lie in the future or before MIN_DATE. ``today`` is passed
    in so the same payload always gets the same verdict.
    """
    date_fields = ()

    def __init__(self, *args, today=None, **kwargs):
        self.today = today or timezone.localdate()
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned_data = super().clean()
        for name in self.date_fields:
            value = cleaned_data.get(name)
            if value is None:
                continue
            if value > self.today:
                self.add_error(name, 'Date cannot be in the future')
            elif value < MIN_DATE:
                self.add_error(name, f'Date cannot be before {MIN_DATE.isoformat()}')
        return cleaned_data


class StudentDetailsForm(CalendarDateMixin, forms.Form):
    """Header fields shared by both report kinds"""
    student_name = forms.CharField(
        max_length=255, error_messages=_required('Student name is required')
    )
    student_id = forms.IntegerField(
        min_value=RULES['student_id']['min'],
        error_messages={
            'required': 'Student ID is required',
            'invalid': 'Student ID must be a positive number',
            'min_value': 'Student ID must be a positive number',
        },
    )
    organisation = forms.CharField(
        max_length=255, error_messages=_required('Organisation is required')
    )
    industry_supervisor = forms.CharField(
        max_length=255, error_messages=_required('Industry supervisor is required')
    )


class WeeklyReportForm(StudentDetailsForm):
    date_fields = ('date_prepared',)

    date_prepared = CalendarDateField(error_messages=_required('Date prepared is required'))
    week_number = forms.IntegerField(
        min_value=RULES['week_number']['min'],
        max_value=RULES['week_number']['max'],
        error_messages={
            'required': 'Week number is required',
            'min_value': 'Week number must be between 1 and 12',
            'max_value': 'Week number must be between 1 and 12',
        },
    )
    plans_for_next_week = forms.CharField(
        widget=forms.Textarea, error_messages=_required('Plans for next week are required')
    )
    total_hours = forms.FloatField(
        min_value=RULES['total_hours']['min'],
        error_messages={
            'required': 'Total hours are required',
            'min_value': 'Total hours cannot be negative',
        },
    )


class TaskForm(CalendarDateMixin, forms.Form):
    date_fields = ('date',)

    day = forms.IntegerField(
        min_value=RULES['day']['min'],
        max_value=RULES['day']['max'],
        error_messages={
            'required': 'Day is required',
            'min_value': 'Day must be between 1 and 7',
            'max_value': 'Day must be between 1 and 7',
        },
    )
    date = CalendarDateField(error_messages=_required('Task date is required'))
    description = forms.CharField(
        widget=forms.Textarea, error_messages=_required('Task description is required')
    )
    hours_spent = forms.FloatField(
        min_value=RULES['hours_spent']['min'],
        max_value=RULES['hours_spent']['max'],
        error_messages={
            'required': 'Hours spent are required',
            'min_value': 'Hours spent must be at least 0.5',
            'max_value': 'Hours spent cannot exceed 24',
        },
    )


class EndOfTermReportForm(StudentDetailsForm):
    date_fields = ('date_of_submit', 'student_signature_date')

    date_of_submit = CalendarDateField(error_messages=_required('Date of submit is required'))
    student_comments = forms.CharField(
        widget=forms.Textarea, error_messages=_required('Student comments are required')
    )
    supervisor_comments = forms.CharField(
        widget=forms.Textarea, error_messages=_required('Supervisor comments are required')
    )
    student_signature = forms.CharField(
        max_length=255, error_messages=_required('Student signature is required')
    )
    student_signature_date = CalendarDateField(
        error_messages=_required('Student signature date is required')
    )


class ScoreItemForm(forms.Form):
    question = forms.CharField(max_length=255, error_messages=_required('Question is required'))
    score = forms.IntegerField(
        min_value=RULES['score']['min'],
        max_value=RULES['score']['max'],
        error_messages={
            'required': 'Score is required',
            'invalid': 'Score must be a whole number',
            'min_value': 'Score must be between 1 and 5',
            'max_value': 'Score must be between 1 and 5',
        },
    )

    def clean_question(self):
        question = self.cleaned_data['question']
        if question not in END_OF_TERM_QUESTIONS:
            raise forms.ValidationError('Unknown rubric question')
        return question


class SupervisorSignatureForm(forms.Form):
    signature = forms.CharField(
        max_length=255, error_messages=_required('Supervisor signature is required')
    )
