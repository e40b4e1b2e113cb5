from django.contrib import admin, messages

from .models import ReportKind, WeeklyReport, Task, EndOfTermReport, ScoreItem
from .services.reports import ReportLifecycleManager, ReportError


# Inline Admin Classes
class ReadOnlyInlineMixin:
    """Children are fixed at creation; the admin only shows them."""
    extra = 0
    max_num = 0
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class TaskInline(ReadOnlyInlineMixin, admin.TabularInline):
    model = Task
    fields = ['position', 'day', 'date', 'description', 'hours_spent']
    readonly_fields = fields
    ordering = ['position']


class ScoreItemInline(ReadOnlyInlineMixin, admin.TabularInline):
    model = ScoreItem
    fields = ['position', 'question', 'score']
    readonly_fields = fields
    ordering = ['position']


class ReportAdminMixin:
    """
    Read-only report admin.

    Reports are created through the student forms or the API and only change
    by signing, so the change form is view-only and there is no add view.
    Deletes go through the lifecycle manager so change events are sent.
    """
    report_kind = None

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def delete_model(self, request, obj):
        ReportLifecycleManager().delete(self.report_kind, obj.pk)

    def delete_queryset(self, request, queryset):
        manager = ReportLifecycleManager()
        for report in queryset:
            manager.delete(self.report_kind, report.pk)


@admin.register(WeeklyReport)
class WeeklyReportAdmin(ReportAdminMixin, admin.ModelAdmin):
    report_kind = ReportKind.WEEKLY
    list_display = ['student_name', 'student_id', 'organisation', 'week_number', 'total_hours', 'is_signed', 'created_at']
    list_filter = ['is_signed', 'week_number', 'organisation']
    search_fields = ['student_name', 'student_id', 'organisation', 'industry_supervisor']
    inlines = [TaskInline]
    actions = ['sign_reports']

    fieldsets = (
        (None, {'fields': ('id', 'student_name', 'student_id', 'organisation', 'industry_supervisor')}),
        ('Week', {'fields': ('date_prepared', 'week_number', 'total_hours', 'plans_for_next_week')}),
        ('Status', {'fields': ('is_signed', 'created_at')}),
    )

    @admin.action(description='Sign selected weekly reports')
    def sign_reports(self, request, queryset):
        """Admin action to sign the selected weekly reports."""
        manager = ReportLifecycleManager()
        signed_count = 0

        for report in queryset:
            try:
                manager.sign(ReportKind.WEEKLY, report.pk)
                signed_count += 1
            except ReportError as e:
                self.message_user(
                    request,
                    f"Error signing report for '{report.student_name}': {str(e)}",
                    level=messages.ERROR
                )

        if signed_count:
            self.message_user(
                request,
                f"Signed {signed_count} weekly report(s)",
                level=messages.SUCCESS
            )


@admin.register(EndOfTermReport)
class EndOfTermReportAdmin(ReportAdminMixin, admin.ModelAdmin):
    report_kind = ReportKind.END_OF_TERM
    list_display = ['student_name', 'student_id', 'organisation', 'date_of_submit', 'supervisor_signature', 'created_at']
    search_fields = ['student_name', 'student_id', 'organisation', 'industry_supervisor']
    inlines = [ScoreItemInline]

    fieldsets = (
        (None, {'fields': ('id', 'student_name', 'student_id', 'organisation', 'industry_supervisor', 'date_of_submit')}),
        ('Comments', {'fields': ('student_comments', 'supervisor_comments')}),
        ('Signatures', {'fields': ('student_signature', 'student_signature_date', 'supervisor_signature', 'supervisor_signature_date')}),
        ('Metadata', {'fields': ('created_at',), 'classes': ('collapse',)}),
    )
