import uvicorn


def main():
    # Serve the API locally; keys are read from the environment or .env
    uvicorn.run("voicechat.main:app", host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
