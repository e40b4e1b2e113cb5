import uuid

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


# Enums as TextChoices
class ReportKind(models.TextChoices):
    WEEKLY = 'weekly', _('Weekly Report')
    END_OF_TERM = 'end_of_term', _('End of Term Report')


class WeeklyReport(models.Model):
    """
    Weekly communication submitted by a student.

    Owns its tasks; the report and its tasks are created and deleted together.
    ``total_hours`` is stored exactly as submitted and never recomputed.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    student_name = models.CharField(max_length=255)
    student_id = models.PositiveIntegerField()
    organisation = models.CharField(max_length=255)
    industry_supervisor = models.CharField(max_length=255)
    date_prepared = models.DateField()
    week_number = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(12)]
    )
    plans_for_next_week = models.TextField()
    total_hours = models.FloatField()
    is_signed = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Weekly Report'
        verbose_name_plural = 'Weekly Reports'

    def __str__(self):
        return f"{self.student_name} - Week {self.week_number}"


class Task(models.Model):
    report = models.ForeignKey(WeeklyReport, on_delete=models.CASCADE, related_name='tasks')
    position = models.PositiveSmallIntegerField(default=0)
    day = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(7)]
    )
    date = models.DateField()
    description = models.TextField()
    hours_spent = models.FloatField(
        validators=[MinValueValidator(0.5), MaxValueValidator(24)]
    )

    class Meta:
        ordering = ['position', 'id']

    def __str__(self):
        return f"Day {self.day}: {self.description[:40]}"


class EndOfTermReport(models.Model):
    """
    Final internship review submitted by a student.

    The report is pending until a supervisor signs it; signing sets
    ``supervisor_signature`` and ``supervisor_signature_date``.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    student_name = models.CharField(max_length=255)
    student_id = models.PositiveIntegerField()
    organisation = models.CharField(max_length=255)
    industry_supervisor = models.CharField(max_length=255)
    date_of_submit = models.DateField()
    student_comments = models.TextField()
    supervisor_comments = models.TextField()
    student_signature = models.CharField(max_length=255)
    student_signature_date = models.DateField()
    supervisor_signature = models.CharField(max_length=255, null=True, blank=True)
    supervisor_signature_date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'End of Term Report'
        verbose_name_plural = 'End of Term Reports'

    @property
    def is_signed(self):
        return self.supervisor_signature is not None

    def __str__(self):
        return f"{self.student_name} - End of Term"


class ScoreItem(models.Model):
    report = models.ForeignKey(EndOfTermReport, on_delete=models.CASCADE, related_name='score_items')
    position = models.PositiveSmallIntegerField(default=0)
    question = models.CharField(max_length=255)
    score = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )

    class Meta:
        ordering = ['position', 'id']

    def __str__(self):
        return f"{self.question}: {self.score}"
