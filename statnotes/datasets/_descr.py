# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Descriptions attached to the bundled and simulated datasets."""

DESCRIPTIONS = {
    "mtcars": """\
Motor Trend Car Road Tests
--------------------------
Fuel consumption and ten aspects of automobile design and performance for
32 automobiles (1973-74 models), extracted from the 1974 Motor Trend US
magazine.

:Number of Instances: 32
:Variables:
    - model  car name
    - mpg    miles per US gallon
    - cyl    number of cylinders
    - disp   displacement (cu.in.)
    - hp     gross horsepower
    - drat   rear axle ratio
    - wt     weight (1000 lbs)
    - qsec   1/4 mile time
    - vs     engine (0 = V-shaped, 1 = straight)
    - am     transmission (0 = automatic, 1 = manual)
    - gear   number of forward gears
    - carb   number of carburetors
""",
    "hair_eye": """\
Hair and Eye Color of Statistics Students
-----------------------------------------
Distribution of hair and eye color and sex in 592 statistics students
(Snee, 1974), stored in long format with one row per cell.

:Number of Cells: 32 (4 hair x 4 eye x 2 sex)
:Variables:
    - hair   Black, Brown, Red, Blond
    - eye    Brown, Blue, Hazel, Green
    - sex    Male, Female
    - count  number of students
""",
    "iris": """\
Iris Plants
-----------
Fisher's iris measurements: four flower dimensions (cm) for 50 plants of
each of three species (setosa, versicolor, virginica).

:Number of Instances: 150 (50 in each of three classes)
""",
}

SIMULATION_NOTES = {
    "simulate_salaries": (
        "Salary (in thousands) of employees as a linear function of years "
        "of experience and education level plus normal noise."
    ),
    "simulate_growth": (
        "Plant growth measured at increasing fertilizer doses; the response "
        "rises then falls following a quadratic curve."
    ),
    "simulate_admissions": (
        "Graduate admissions: GRE score, GPA and prestige rank of the "
        "undergraduate institution with a binary admission outcome drawn "
        "from a logistic model."
    ),
    "simulate_customers": (
        "Customers described by age, income, spending score, visits and "
        "channel, assigned to one of three segments."
    ),
    "simulate_blobs": (
        "Isotropic Gaussian clusters in two dimensions."
    ),
    "simulate_survey": (
        "Questionnaire items driven by a small number of latent factors."
    ),
    "simulate_air_quality": (
        "Daily air quality readings with missing values in the ozone and "
        "solar radiation columns."
    ),
    "simulate_housing": (
        "House prices with nonlinear effects and an interaction between "
        "size and location."
    ),
}
