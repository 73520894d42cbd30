from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from campus.models import (
    Calendar,
    CalendarCohort,
    Cohort,
    ConnectSlot,
    Course,
    DbConfig,
    Domain,
    Faculty,
    FacultyCohortEnrollment,
    Founder,
    Organisation,
    OrganisationAdmin,
    School,
    SchoolAdmin,
    Team,
    User,
)

admin.site.site_header = "Campus Administration"
admin.site.site_title = "Campus Admin"
admin.site.index_title = "Administration"


class DomainInline(admin.TabularInline):
    model = Domain
    extra = 0


class SchoolAdminInline(admin.TabularInline):
    model = SchoolAdmin
    extra = 0
    autocomplete_fields = ("user",)


@admin.register(School)
class SchoolModelAdmin(admin.ModelAdmin):
    list_display = ("name", "created_at")
    search_fields = ("name",)
    inlines = [DomainInline, SchoolAdminInline]


class OrganisationAdminInline(admin.TabularInline):
    model = OrganisationAdmin
    extra = 0
    autocomplete_fields = ("user",)


@admin.register(Organisation)
class OrganisationModelAdmin(admin.ModelAdmin):
    list_display = ("name", "school")
    list_filter = ("school",)
    search_fields = ("name",)
    inlines = [OrganisationAdminInline]


@admin.register(User)
class CampusUserAdmin(UserAdmin):
    list_display = ("username", "email", "first_name", "last_name", "school", "is_staff")
    list_filter = UserAdmin.list_filter + ("school",)
    fieldsets = UserAdmin.fieldsets + (
        ("Campus", {"fields": ("school", "organisation", "discord_user_id")}),
    )


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("name", "school", "featured")
    list_filter = ("school", "featured")
    search_fields = ("name",)


class FacultyCohortEnrollmentInline(admin.TabularInline):
    model = FacultyCohortEnrollment
    extra = 0


class CalendarCohortInline(admin.TabularInline):
    model = CalendarCohort
    extra = 0


@admin.register(Cohort)
class CohortAdmin(admin.ModelAdmin):
    list_display = ("name", "course", "ends_at")
    list_filter = ("course__school",)
    search_fields = ("name", "course__name")
    inlines = [FacultyCohortEnrollmentInline, CalendarCohortInline]


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ("name", "cohort")
    search_fields = ("name",)


@admin.register(Founder)
class FounderAdmin(admin.ModelAdmin):
    list_display = ("user", "cohort", "team")
    list_select_related = ("user", "cohort", "team")
    search_fields = ("user__username", "user__email")


@admin.register(Faculty)
class FacultyAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "school", "token")
    list_filter = ("school",)
    search_fields = ("name", "email")
    readonly_fields = ("token",)


@admin.register(ConnectSlot)
class ConnectSlotAdmin(admin.ModelAdmin):
    list_display = ("faculty", "slot_at")
    list_filter = ("faculty",)
    date_hierarchy = "slot_at"


@admin.register(Calendar)
class CalendarAdmin(admin.ModelAdmin):
    list_display = ("name", "course")
    inlines = [CalendarCohortInline]


@admin.register(DbConfig)
class DbConfigAdmin(admin.ModelAdmin):
    list_display = ("key", "updated_at")
    search_fields = ("key",)
