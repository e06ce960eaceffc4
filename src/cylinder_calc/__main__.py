from cylinder_calc.main import main

if __name__ == "__main__":
    main()
