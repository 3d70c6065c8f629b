# SOURCES
INSURANCE_DATA_URL = (
    "https://raw.githubusercontent.com/stedy/"
    "Machine-Learning-with-R-datasets/master/insurance.csv"
)
CDC_SMOKING_URL = (
    "https://www.cdc.gov/tobacco/php/data-statistics/"
    "adult-data-cigarettes/index.html"
)
CDC_BULK_DATA_URL = "https://data.cdc.gov/browse?q=tobacco%20use"
REQUEST_TIMEOUT = 15  # sec

# Outermost containers holding one data table each on the CDC page
_CARD = "contains(concat(' ', normalize-space(@class), ' '), ' card ')"
TABLE_BLOCK_XPATH = f"//div[{_CARD}][not(ancestor::div[{_CARD}])]"

# INSURANCE DATASET
INSURANCE_COLUMNS = ["age", "sex", "bmi", "children", "smoker", "region", "charges"]
NUMERIC_COLUMNS = ["age", "bmi", "children", "charges"]
CATEGORICAL_COLUMNS = ["sex", "smoker", "region"]
TARGET_COLUMN = "charges"

# STATISTICS
ALPHA = 0.05

# REGRESSION
N_ESTIMATORS = 500
TEST_SIZE = 0.2
RANDOM_SEED = 42

# PREVALENCE DATASET
PREVALENCE_COLUMNS = ["Category", "Group", "Percentage", "Population", "Prevalence"]
POPULATION_PLACEHOLDER = "Not reported"

# FOLDERS
LOGS_FOLDER = "./logs"
DATASETS_FOLDER = "./data/datasets/"
REPORTS_FOLDER = "./data/reports/"

# FILENAMES
PREVALENCE_CSV = "cdc_smoking_prevalence.csv"
HYPOTHESIS_SUMMARY_CSV = "hypothesis_summary.csv"
FEATURE_IMPORTANCE_CSV = "feature_importance.csv"
PREVALENCE_SUMMARY_CSV = "prevalence_by_category.csv"
