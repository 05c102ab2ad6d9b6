"""Export of overlap reports to CSV and Markdown files."""
import os
import csv
import sys
import markdown

def write_csv(filename: str, report) -> int:
    """Write the overlaps of a report to a CSV file.
    
    Args:
        filename: Output file name
        report: ValidationReport to export
        
    Returns:
        Number of overlap rows written
    """
    rows = report.table_rows()
    with open(filename, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(report.table_headers)
        writer.writerows(rows)
    return len(rows)

def write_markdown(md_path: str, report, title: str, overwrite: bool = False):
    """Add a report section to a Markdown file.
    
    A new (or overwritten) file starts with `title` as its heading; an
    existing file gets the report appended below the earlier sections.
    
    Args:
        md_path: Output file path
        report: ValidationReport to export
        title: Heading of a new file
        overwrite: Whether to replace an existing file
    """
    append = os.path.exists(md_path) and not overwrite
    if append:
        print(f"[INFO] File '{md_path}' exists. Appending report.")
    elif overwrite and os.path.exists(md_path):
        print(f"[INFO] File '{md_path}' exists. Overwriting as requested.")
    
    section = f"\n{report.to_markdown()}\n"
    # Rendering fails on a malformed table before anything touches the file
    try:
        markdown.markdown(section, extensions=['tables'])
    except Exception as e:
        print(f"[ERROR] Could not render the report as markdown: {e}")
        sys.exit(3)
    
    try:
        with open(md_path, 'a' if append else 'w', encoding='utf-8') as f:
            if f.tell() == 0:
                f.write(f"# {title}\n")
            f.write(section)
    except OSError as e:
        print(f"[ERROR] Failed to write to '{md_path}': {e}")
        sys.exit(2)
