from mongodb_isolation.main import run

if __name__ == "__main__":
    run()
