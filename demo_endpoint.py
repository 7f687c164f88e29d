"""
Quick demo script to run the job recommendation API locally.

This script starts a local server and shows how to make requests to the endpoint.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Job Opening Assistant Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:        GET  http://localhost:8000/health")
    print("   - Job Recommendations: POST http://localhost:8000/jobs/recommendations")
    print("   - API Docs:                 http://localhost:8000/docs")
    print()
    print("⚙️  Required environment (or .env):")
    print("   MONGODB_URI, DB_NAME, COLLECTION_NAME, GOOGLE_API_KEY")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/jobs/recommendations" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"query": "jobs in gurgaon"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "job_assistant.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
