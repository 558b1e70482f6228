from string import Template

# First Information Report (Section 154 CrPC)
FIR_TEMPLATE = Template("""
FIRST INFORMATION REPORT
(Under Section 154 of the Code of Criminal Procedure, 1973)

FIR No.: $fir_number
Police Station: $police_station
Date: $report_date

COMPLAINANT DETAILS:
Name: $complainant_name

INCIDENT DETAILS:
Type of Incident: $incident_type
Date of Incident: $incident_date
Place of Occurrence: $incident_location
Description: $incident_description

PERSONS NAMED:
$persons_list

APPLICABLE SECTIONS:
Based on AI analysis, the following sections may be applicable:
$legal_sections_list

This FIR has been generated with AI assistance and should be reviewed by the investigating officer.
""")
