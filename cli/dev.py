def main() -> None:
    """Run development server."""
    import uvicorn

    uvicorn.run(
        "student_ledger.main:create_app",
        host="0.0.0.0",
        port=8080,
        reload=True,
        factory=True,
        log_level="info",
    )
