"""
Ingestion pipeline orchestrator.

Rebuilds the article collection from news sitemaps: reset collection ->
collect article URLs -> fetch -> chunk -> embed -> upsert, one article
at a time until the processed-article cap is reached. Per-article failures
are logged and skipped; only a failed collection reset aborts the run.

Run with ``python -m newsrag.core.document_processing.entrypoint``.

Dependencies: All task modules, configs, newsrag.boundary
System role: Pipeline orchestration (coordinates only)
"""

import argparse
import logging
import sys
import time

import httpx

from newsrag.boundary.embeddings import EmbeddingClient, get_embedding_client
from newsrag.boundary.vdb import QdrantVectorStore
from newsrag.configs import load_section
from newsrag.configs.base import BaseSettings
from newsrag.configs.embedding import EmbeddingSettings
from newsrag.configs.generation import GenerationSettings
from newsrag.configs.vector_store import VectorStoreSettings
from newsrag.core.exceptions import (
    ConfigurationError,
    DocumentProcessingError,
    SetupError,
    VectorStoreError,
)
from newsrag.observability import configure_logging
from newsrag.observability.log_utils import log_exception_with_context

from .configs import IngestionSettings
from .models import IngestionResult
from .tasks import ArticleFetcher, ChunkingTask, SitemapSource, VectorStoreTask

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; newsrag-ingest/0.1)"


class IngestionPipeline:
    """Orchestrate a full collection rebuild from configured sitemaps."""

    def __init__(
        self,
        vector_store: QdrantVectorStore,
        embedding_client: EmbeddingClient,
        sitemap_source: SitemapSource,
        article_fetcher: ArticleFetcher,
        settings: IngestionSettings | None = None,
        dimension: int = 768,
        distance: str = "Cosine",
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            vector_store: Qdrant adapter for the target collection
            embedding_client: Batch embedder
            sitemap_source: Locator source
            article_fetcher: Article text source
            settings: Ingestion settings (uses defaults if None)
            dimension: Vector dimensionality of the collection
            distance: Similarity metric of the collection
        """
        self._settings = settings or IngestionSettings()
        self._vector_store = vector_store
        self._embedding_client = embedding_client
        self._sitemap_source = sitemap_source
        self._article_fetcher = article_fetcher
        self._dimension = dimension
        self._distance = distance

        self._chunking_task = ChunkingTask(max_chars=self._settings.chunk_max_chars)
        self._vector_store_task = VectorStoreTask(
            vector_store=vector_store,
            id_strategy=self._settings.chunk_id_strategy,
        )

    def run(self) -> IngestionResult:
        """
        Rebuild the collection.

        Returns:
            IngestionResult: Counters and duration of the run

        Raises:
            SetupError: If the collection cannot be recreated
        """
        start_time = time.perf_counter()
        result = IngestionResult(collection=self._vector_store.collection_name)
        max_articles = self._settings.max_articles

        self._vector_store.reset_collection(self._dimension, self._distance)

        seen: set[str] = set()
        for sitemap_url in self._settings.sitemap_urls:
            if result.articles_processed >= max_articles:
                break

            for url in self._sitemap_source.fetch_urls(sitemap_url):
                if result.articles_processed >= max_articles:
                    break
                if url in seen:
                    continue
                seen.add(url)

                written = self.process_article(url)
                if written is None:
                    result.articles_skipped += 1
                    continue
                result.articles_processed += 1
                result.chunks_upserted += written

        result.processing_time_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:run - Finished: processed {result.articles_processed} articles",
            extra={
                "chunks_upserted": result.chunks_upserted,
                "articles_skipped": result.articles_skipped,
                "processing_time_ms": round(result.processing_time_ms, 1),
            },
        )
        return result

    def process_article(self, url: str) -> int | None:
        """
        Fetch, chunk, embed and upsert a single article.

        Args:
            url: Article URL

        Returns:
            int | None: Points written, or None when the article was skipped
        """
        try:
            text = self._article_fetcher.fetch(url)
            if not text or len(text) <= self._settings.min_article_chars:
                logger.info(f"{__name__}:process_article - Skipping short or empty article", extra={"url": url})
                return None

            chunks = self._chunking_task.chunk(text)
            embeddings = self._embedding_client.embed(chunks)
            if len(embeddings) != len(chunks):
                logger.warning(
                    f"{__name__}:process_article - Embedding count mismatch, skipping article",
                    extra={"url": url, "chunks": len(chunks), "embeddings": len(embeddings)},
                )
                return None

            written = self._vector_store_task.upload(url, chunks, embeddings)
        except (DocumentProcessingError, VectorStoreError, ValueError) as e:
            log_exception_with_context(
                logger,
                f"{__name__}:process_article - Failed to process article, skipping",
                e,
                url=url,
            )
            return None
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:process_article - Unexpected error, skipping article",
                e,
                url=url,
            )
            return None

        logger.info(f"{__name__}:process_article - Processed article", extra={"url": url, "chunks": written})
        return written


def build_http_client(timeout: float) -> httpx.Client:
    """HTTP client shared by sitemap and article fetching."""
    return httpx.Client(
        timeout=timeout,
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="newsrag-ingest",
        description="Rebuild the news article collection from sitemaps.",
    )
    parser.add_argument(
        "--max-articles",
        type=int,
        default=None,
        help="Stop after this many articles were processed (overrides INGEST_MAX_ARTICLES)",
    )
    parser.add_argument(
        "--sitemap",
        action="append",
        dest="sitemaps",
        default=None,
        help="Sitemap URL to read; repeat for several (overrides INGEST_SITEMAP_URLS)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Console entry point.

    Returns:
        int: Process exit code (1 on configuration or setup failure)
    """
    args = parse_args(argv)

    try:
        configure_logging(args.log_level or load_section(BaseSettings).log_level)
    except ConfigurationError as e:
        configure_logging("INFO")
        logger.error(f"{__name__}:main - {e.message}")
        return 1

    try:
        ingestion = load_section(IngestionSettings)
        embedding = load_section(EmbeddingSettings)
        vector_store_settings = load_section(VectorStoreSettings)
        generation = (
            load_section(GenerationSettings)
            if embedding.embedding_provider.lower() == "gemini"
            else None
        )
    except ConfigurationError as e:
        logger.error(f"{__name__}:main - {e.message}")
        return 1

    overrides = {}
    if args.max_articles is not None:
        overrides["max_articles"] = args.max_articles
    if args.sitemaps:
        overrides["sitemap_urls"] = args.sitemaps
    if overrides:
        ingestion = ingestion.model_copy(update=overrides)

    http_client = build_http_client(ingestion.fetch_timeout_seconds)
    embedding_http = httpx.Client(timeout=embedding.embedding_timeout_seconds)
    vector_store = QdrantVectorStore.from_settings(
        url=vector_store_settings.url,
        api_key=vector_store_settings.api_key,
        collection_name=vector_store_settings.collection_name,
        timeout=vector_store_settings.timeout_seconds,
    )

    try:
        pipeline = IngestionPipeline(
            vector_store=vector_store,
            embedding_client=get_embedding_client(
                embedding,
                http_client=embedding_http,
                gemini_api_key=generation.api_key if generation else None,
                gemini_model=generation.embedding_model if generation else "models/text-embedding-004",
            ),
            sitemap_source=SitemapSource(url_prefix=ingestion.url_prefix, http_client=http_client),
            article_fetcher=ArticleFetcher(http_client=http_client),
            settings=ingestion,
            dimension=embedding.embedding_dimension,
            distance=vector_store_settings.distance,
        )
        result = pipeline.run()
    except SetupError as e:
        logger.error(f"{__name__}:main - Collection setup failed, aborting: {e}")
        return 1
    finally:
        http_client.close()
        embedding_http.close()
        vector_store.close()

    logger.info(f"{__name__}:main - Ingestion complete: {result.model_dump_json()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
