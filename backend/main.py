"""Main entry point for the document analytics API."""
import logging
from typing import List
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import PORT, LOG_LEVEL, LOG_FORMAT, CORS_ORIGINS, PAGE_SIZE, MIN_KEYWORD_LENGTH, HASH_ALGORITHM, TEXT_ENCODING
from logger import setup_logging
from models.document import Document
from models.api import (
    ImportDocumentRequest,
    UpdateDocumentRequest,
    UpdatePageRequest,
    PageResponse,
    DocumentResponse,
    IntegrityResponse,
    SearchRequest,
    SearchResponse,
    CorpusDocumentRequest,
    CorpusSizeResponse,
    ScoreRequest,
    ScoreResponse,
)
from services.analytics_facade import AnalyticsFacade
from services.content_hasher import ContentHasher, EncodingError
from services.document_manager import DocumentManager, DocumentNotFoundError
from services.document_repository import InMemoryDocumentRepository
from services.pagination_engine import PaginationEngine
from services.search_index import SearchIndex

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Document Analytics",
    description="Pagination, fingerprinting, TF-IDF scoring and keyword search for the text editor",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Build the repository, document manager and analytics facade."""
    setup_logging(LOG_LEVEL, json_format=LOG_FORMAT == "json")
    logger.info("Initializing document analytics services...")

    try:
        paginator = PaginationEngine(page_size=PAGE_SIZE)
        hasher = ContentHasher(algorithm=HASH_ALGORITHM, encoding=TEXT_ENCODING)

        # One repository and one corpus per process, owned by the app
        repository = InMemoryDocumentRepository()
        app.state.document_manager = DocumentManager(repository, paginator=paginator, hasher=hasher)
        logger.info("Initialized DocumentManager")

        app.state.analytics = AnalyticsFacade(
            paginator=paginator,
            hasher=hasher,
            search_index=SearchIndex(min_keyword_length=MIN_KEYWORD_LENGTH)
        )
        logger.info("Initialized AnalyticsFacade")

        logger.info("All services initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise


async def document_not_found_handler(request: Request, exc: DocumentNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def encoding_error_handler(request: Request, exc: EncodingError) -> JSONResponse:
    logger.warning(f"Rejected text that cannot be encoded as {exc.encoding}")
    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "code": "encoding_error",
                "message": str(exc),
                "details": {"encoding": exc.encoding, "algorithm": exc.algorithm}
            }
        }
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


app.add_exception_handler(DocumentNotFoundError, document_not_found_handler)
app.add_exception_handler(EncodingError, encoding_error_handler)
app.add_exception_handler(ValueError, value_error_handler)


def _to_response(document: Document) -> DocumentResponse:
    return DocumentResponse(
        id=document.id,
        name=document.name,
        fingerprint=document.fingerprint,
        created_at=document.created_at,
        modified_at=document.modified_at,
        total_pages=document.total_pages,
        pages=[PageResponse(page_number=page.page_number, content=page.content) for page in document.pages]
    )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Document Analytics API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "document-analytics",
        "version": "1.0.0",
        "corpus_size": app.state.analytics.corpus_size
    }


@app.post("/documents", response_model=DocumentResponse, status_code=201)
async def import_document(request: ImportDocumentRequest) -> DocumentResponse:
    """Import raw text as a new paginated, fingerprinted document."""
    document = app.state.document_manager.import_document(request.name, request.content)
    return _to_response(document)


@app.get("/documents", response_model=List[DocumentResponse])
async def list_documents() -> List[DocumentResponse]:
    return [_to_response(document) for document in app.state.document_manager.list_documents()]


@app.get("/documents/{document_id}", response_model=DocumentResponse)
async def get_document(document_id: int) -> DocumentResponse:
    return _to_response(app.state.document_manager.get_document(document_id))


@app.put("/documents/{document_id}", response_model=DocumentResponse)
async def update_document(document_id: int, request: UpdateDocumentRequest) -> DocumentResponse:
    """Replace a document's content; the stored fingerprint is kept."""
    document = app.state.document_manager.update_document(document_id, request.content, name=request.name)
    return _to_response(document)


@app.put("/documents/{document_id}/pages/{page_number}", response_model=DocumentResponse)
async def update_page(document_id: int, page_number: int, request: UpdatePageRequest) -> DocumentResponse:
    """Replace one page's text and re-paginate the document."""
    document = app.state.document_manager.update_page(document_id, page_number, request.content)
    return _to_response(document)


@app.get("/documents/{document_id}/integrity", response_model=IntegrityResponse)
async def check_integrity(document_id: int) -> IntegrityResponse:
    """Compare the import fingerprint with the document's current content."""
    report = app.state.document_manager.check_integrity(document_id)
    return IntegrityResponse(
        document_id=report.document_id,
        stored_fingerprint=report.stored_fingerprint,
        session_fingerprint=report.session_fingerprint,
        modified=report.modified
    )


@app.post("/documents/{document_id}/relevance", response_model=ScoreResponse)
async def document_relevance(document_id: int) -> ScoreResponse:
    """Score a stored document against a corpus of every other stored document."""
    manager = app.state.document_manager
    selected = manager.get_document(document_id)
    others = [document.content for document in manager.list_documents() if document.id != document_id]

    score = app.state.analytics.relevance(selected.content, others)
    return ScoreResponse(score=score, corpus_size=len(others))


@app.post("/search", response_model=SearchResponse)
async def search(request: SearchRequest) -> SearchResponse:
    """
    Keyword search across stored documents.

    Keywords shorter than the minimum length return no results.
    """
    manager = app.state.document_manager
    if request.document_ids is None:
        documents = manager.list_documents()
    else:
        documents = [manager.get_document(document_id) for document_id in request.document_ids]

    results = app.state.analytics.search_keyword(request.keyword, documents)
    return SearchResponse(keyword=request.keyword, results=results)


# Endpoints run on the event loop thread, which serializes corpus updates and scoring
@app.post("/corpus/documents", response_model=CorpusSizeResponse)
async def add_corpus_document(request: CorpusDocumentRequest) -> CorpusSizeResponse:
    corpus_size = app.state.analytics.add_to_corpus(request.text)
    return CorpusSizeResponse(corpus_size=corpus_size)


@app.post("/corpus/score", response_model=ScoreResponse)
async def score_text(request: ScoreRequest) -> ScoreResponse:
    analytics = app.state.analytics
    return ScoreResponse(score=analytics.score(request.text), corpus_size=analytics.corpus_size)


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Document Analytics API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
