# /django_ui/views.py
from django.shortcuts import render

from ..settings import settings
from ..services.browser import ERROR_GUIDANCE, SKELETON_CARDS, DisplayState, PagesBrowser

# Populated by main.py at startup
_svc = None


async def index(request):
    username = request.GET.get("username")
    query = request.GET.get("q", "")
    if username is None:
        # initial load
        username = settings.default_username

    context = {
        "username": username,
        "query": query,
        "guidance": ERROR_GUIDANCE,
        "skeletons": range(SKELETON_CARDS),
    }

    if _svc is None:
        context["state"] = DisplayState.ERROR.value
        context["error"] = "Pages service is not available."
    else:
        browser = PagesBrowser(_svc, username=username, search_term=query)
        await browser.fetch()
        context.update(
            browser=browser,
            state=browser.state.value,
            error=browser.error,
            grid=browser.grid(),
        )

    return render(request, "django_ui/index.html", context)
