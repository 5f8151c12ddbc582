import uvicorn

from job_board.config import settings

if __name__ == "__main__":
    print(f"🚀 {settings.PROJECT_NAME} 시작 중... (포트: 8000)")
    print("   📚 Swagger: http://localhost:8000/docs")
    uvicorn.run("job_board.main:app", host="0.0.0.0", port=8000, reload=False)
