"""
URL configuration for campus project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.1/topics/http/urls/
"""

from django.conf import settings
from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import path
from graphene_django.views import GraphQLView

from campus.views.faculty import weekly_slots
from campus.views.health import health_check
from campus.views.home import csp_report, faculty_page, foundation_page, index_page
from campus.views.organisations.students import student_show, student_submissions

# Custom error handlers
handler403 = 'campus.views.errors.handler403'
handler404 = 'campus.views.errors.handler404'
handler500 = 'campus.views.errors.handler500'

urlpatterns = [
    path("", index_page, name="index"),
    path("faculty", faculty_page, name="faculty"),
    path("foundation", foundation_page, name="foundation"),
    path("csp_report", csp_report, name="csp_report"),
    path("health/", health_check, name="health_check"),
    path(
        "sign-in",
        auth_views.LoginView.as_view(template_name="auth/sign_in.html"),
        name="sign_in",
    ),
    path("sign-out", auth_views.LogoutView.as_view(), name="sign_out"),
    path(
        "faculty/weekly_slots/<str:token>",
        weekly_slots,
        name="faculty_weekly_slots",
    ),
    path("org/students/<int:student_id>", student_show, name="organisations_student"),
    path(
        "org/students/<int:student_id>/submissions",
        student_submissions,
        name="organisations_student_submissions",
    ),
    path("graphql", GraphQLView.as_view(graphiql=settings.DEBUG), name="graphql"),
    path("admin/", admin.site.urls),
]
