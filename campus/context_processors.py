from django.urls import Resolver404, resolve

from campus.models import DbConfig

NAVIGATION_FEATURES = ("faculty_page", "foundation_page")


def current_school(request):
    """Add the school resolved from the request host to the template context."""
    return {"current_school": getattr(request, "school", None)}


def url_name(request):
    try:
        return {"url_name": resolve(request.path_info).url_name}
    except Resolver404:
        return {"url_name": None}


def features(request):
    """Feature flags that toggle navigation links."""
    user = getattr(request, "user", None)
    return {
        "features": {feature: DbConfig.feature_active(feature, user) for feature in NAVIGATION_FEATURES}
    }
