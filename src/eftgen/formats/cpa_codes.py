"""CPA Standard 007 transaction codes.

The table is advisory. An unknown code only produces a validation warning,
so banks that issue institution-specific codes can still be targeted.
Use ``register_cpa_code`` to silence the warning for such codes.
"""

from __future__ import annotations

from typing import Optional

from eftgen.core.types import CPACode

CPA_CODE_MIN = 0
CPA_CODE_MAX = 999

# Categories follow Payments Canada (formerly the Canadian Payments
# Association) Standard 007, "Transaction Codes", as published for AFT
# files. Sub-code descriptions are paraphrased; check the current edition
# before relying on a description for anything beyond the warning.
CPA_CODES: dict[CPACode, str] = {
    # Payroll
    200: "Payroll Deposit",
    201: "Payroll - Regular",
    202: "Payroll - Vacation",
    203: "Payroll - Overtime",
    204: "Payroll - Advance",
    205: "Payroll - Commission",
    206: "Payroll - Bonus",
    207: "Payroll - Adjustment",
    # Pension and annuity
    230: "Pension",
    231: "Pension - Private",
    232: "Pension - Government",
    233: "Pension - Old Age Security",
    234: "Pension - Canada/Quebec Pension Plan",
    240: "Annuity",
    # Allowances and benefits
    250: "Allowance",
    251: "Allowance - Child",
    252: "Allowance - Employment Insurance",
    253: "Allowance - Social Assistance",
    254: "Allowance - Workers Compensation",
    # Investment
    260: "Investment",
    261: "Investment - Dividend",
    262: "Investment - Interest",
    263: "Investment - Maturity",
    264: "Investment - Mutual Fund",
    # Government
    270: "Government Payment",
    271: "Government Payment - Tax Refund",
    272: "Government Payment - GST/HST Credit",
    273: "Government Payment - Rebate",
    # Insurance
    280: "Insurance",
    281: "Insurance - Life",
    282: "Insurance - Health",
    283: "Insurance - Property",
    284: "Insurance - Auto",
    285: "Insurance - Claim Settlement",
    # Mortgage and loans
    300: "Mortgage",
    301: "Mortgage - Payment",
    310: "Loan",
    311: "Loan - Personal",
    312: "Loan - Student",
    313: "Loan - Auto",
    320: "Line of Credit",
    # Rent and property
    330: "Rent",
    331: "Rent - Residential",
    332: "Rent - Commercial",
    340: "Property Tax",
    350: "Condominium Fees",
    # Utilities and services
    370: "Utility",
    371: "Utility - Electricity",
    372: "Utility - Gas",
    373: "Utility - Water",
    374: "Utility - Telephone",
    375: "Utility - Cable",
    376: "Utility - Internet",
    # Bill payment and cash management
    400: "Transfer",
    401: "Transfer - Intra-Company",
    402: "Transfer - Inter-Company",
    430: "Bill Payment",
    431: "Bill Payment - Credit Card",
    440: "Cash Management",
    450: "Miscellaneous Payments",
    451: "Miscellaneous - Refund",
    452: "Miscellaneous - Expense Reimbursement",
    460: "Accounts Payable",
    461: "Accounts Payable - Supplier",
    470: "Fees and Dues",
    471: "Fees - Membership",
    472: "Fees - Tuition",
    480: "Donation",
    481: "Donation - Charitable",
    # Pre-authorized debits
    700: "Business PAD",
    701: "Business PAD - Supplier",
    702: "Business PAD - Franchise",
    710: "Personal PAD",
    711: "Personal PAD - Recurring",
    720: "Sporadic PAD",
}


def is_valid_cpa_code(code: CPACode) -> bool:
    return code in CPA_CODES


def describe_cpa_code(code: CPACode) -> Optional[str]:
    return CPA_CODES.get(code)


def register_cpa_code(code: CPACode, description: str) -> None:
    """Add an institution-specific code to the known table."""
    if not CPA_CODE_MIN <= code <= CPA_CODE_MAX:
        raise ValueError(f"CPA code must be between {CPA_CODE_MIN} and {CPA_CODE_MAX}: {code}")
    CPA_CODES[code] = description
