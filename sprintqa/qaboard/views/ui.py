from django.conf import settings
from django.http import FileResponse, Http404
from django.views.decorators.http import require_GET

UI_DOCUMENT = 'qa-ui.html'


@require_GET
def qa_ui(request):
    """
    Serve the single-page QA board UI
    """
    path = settings.BASE_DIR / 'static' / UI_DOCUMENT
    if not path.is_file():
        raise Http404(f"{UI_DOCUMENT} not found")
    return FileResponse(path.open('rb'), content_type='text/html')
