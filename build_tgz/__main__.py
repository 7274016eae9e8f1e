from build_tgz.main import main

if __name__ == "__main__":
    main()
