"""Nova React usage templates, one per component.

Each template carries its own import lines followed by the JSX usage block.
Templates are parsed and merged by ``suggester.snippets.service``.
"""
from __future__ import annotations

from typing import Dict

from suggester.catalog.models import ComponentName

PRIMARY_PACKAGE = "@visa/nova-react"
ICON_PACKAGE = "@visa/nova-icons-react"

# Import statements are emitted in this order
PACKAGE_ORDER = (PRIMARY_PACKAGE, ICON_PACKAGE)

# Icons that templates may reference in markup without importing them
ICON_NAMES = (
    "VisaPasswordShowTiny",
    "VisaPasswordHideTiny",
    "VisaSearchTiny",
    "VisaErrorTiny",
    "VisaDeleteTiny",
    "VisaAddTiny",
    "VisaConnectTiny",
    "VisaNotificationsTiny",
    "VisaGlossaryLow",
    "VisaChevronRightTiny",
    "VisaClearAltTiny",
    "VisaFileUploadTiny",
    "VisaSaveTiny",
    "VisaHistoryTiny",
    "VisaAccountLow",
)


COMPONENT_SNIPPETS: Dict[ComponentName, str] = {
    # ---------- FORM COMPONENTS ----------
    ComponentName.Input: """import { Input, InputContainer, Label, Utility } from '@visa/nova-react';

<Utility vFlex vFlexCol vGap={4}>
  <Label htmlFor="input">Label</Label>
  <InputContainer>
    <Input id="input" type="text" aria-required="true" />
  </InputContainer>
</Utility>""",

    ComponentName.PasswordInput: """import { VisaPasswordHideTiny, VisaPasswordShowTiny } from '@visa/nova-icons-react';
import { Button, Input, InputContainer, Label, Utility } from '@visa/nova-react';

<Utility vFlex vFlexCol vGap={4}>
  <Label htmlFor="password">Password</Label>
  <InputContainer>
    <Input id="password" type="password" aria-required="true" />
    <Button
      aria-label="toggle password visibility"
      buttonSize="small"
      colorScheme="tertiary"
      iconButton
    >
      <VisaPasswordShowTiny />
    </Button>
  </InputContainer>
</Utility>""",

    ComponentName.EmailInput: """import { Input, InputContainer, Label, Utility } from '@visa/nova-react';

<Utility vFlex vFlexCol vGap={4}>
  <Label htmlFor="email">Email</Label>
  <InputContainer>
    <Input id="email" type="email" aria-required="true" />
  </InputContainer>
</Utility>""",

    ComponentName.SearchInput: """import { VisaSearchTiny } from '@visa/nova-icons-react';
import { Input, InputContainer, Label, Utility } from '@visa/nova-react';

<Utility vFlex vFlexCol vGap={4}>
  <Label htmlFor="search">Search</Label>
  <InputContainer>
    <Utility vFlex vFlexCol>
      <VisaSearchTiny />
    </Utility>
    <Input id="search" type="search" placeholder="Search..." />
  </InputContainer>
</Utility>""",

    ComponentName.Textarea: """import { InputContainer, Label, Textarea, Utility } from '@visa/nova-react';

<Utility vFlex vFlexCol vGap={4}>
  <Label htmlFor="textarea">Description</Label>
  <InputContainer className="v-flex-row">
    <Textarea id="textarea" aria-required="true" />
  </InputContainer>
</Utility>""",

    ComponentName.Button: """import { Button } from '@visa/nova-react';

<Button>Primary action</Button>""",

    ComponentName.SecondaryButton: """import { Button } from '@visa/nova-react';

<Button colorScheme="secondary">Secondary action</Button>""",

    ComponentName.SubmitButton: """import { Button } from '@visa/nova-react';

<Button type="submit">Submit</Button>""",

    ComponentName.Checkbox: """import { Checkbox, Label, Utility } from '@visa/nova-react';

<Utility vAlignItems="center" vFlex vGap={2}>
  <Checkbox id="checkbox" />
  <Label htmlFor="checkbox">Remember me</Label>
</Utility>""",

    ComponentName.Radio: """import { Radio, Label, Utility } from '@visa/nova-react';

<fieldset>
  <legend>Choose an option</legend>
  <Utility vFlex vFlexCol vGap={2}>
    <Utility vAlignItems="center" vFlex vGap={2}>
      <Radio id="option1" name="options" />
      <Label htmlFor="option1">Option 1</Label>
    </Utility>
    <Utility vAlignItems="center" vFlex vGap={2}>
      <Radio id="option2" name="options" />
      <Label htmlFor="option2">Option 2</Label>
    </Utility>
  </Utility>
</fieldset>""",

    ComponentName.Select: """import { Label, Select, Utility } from '@visa/nova-react';

<Utility vFlex vFlexCol vGap={4}>
  <Label htmlFor="select">Choose option</Label>
  <Select id="select" aria-required="true">
    <option value="">Select an option</option>
    <option value="option1">Option 1</option>
    <option value="option2">Option 2</option>
  </Select>
</Utility>""",

    # ---------- LAYOUT COMPONENTS ----------
    ComponentName.ContentCard: """import { ContentCard, ContentCardBody, ContentCardTitle } from '@visa/nova-react';

<ContentCard>
  <ContentCardBody>
    <ContentCardTitle variant="headline-4">Card Title</ContentCardTitle>
    <p>Card content goes here</p>
  </ContentCardBody>
</ContentCard>""",

    ComponentName.Panel: """import { Panel, PanelBody, PanelHeader } from '@visa/nova-react';

<Panel>
  <PanelHeader>Panel Title</PanelHeader>
  <PanelBody>
    Panel content goes here
  </PanelBody>
</Panel>""",

    ComponentName.Divider: """import { Divider } from '@visa/nova-react';

<Divider />""",

    # ---------- NAVIGATION ----------
    ComponentName.Breadcrumbs: """import { Breadcrumbs, BreadcrumbsItem, Link } from '@visa/nova-react';

<Breadcrumbs>
  <BreadcrumbsItem>
    <Link href="/">Home</Link>
  </BreadcrumbsItem>
  <BreadcrumbsItem>
    <Link href="/products">Products</Link>
  </BreadcrumbsItem>
  <BreadcrumbsItem>Current Page</BreadcrumbsItem>
</Breadcrumbs>""",

    ComponentName.Tabs: """import { Tab, TabContent, TabList, Tabs } from '@visa/nova-react';

<Tabs>
  <TabList>
    <Tab>Tab 1</Tab>
    <Tab>Tab 2</Tab>
    <Tab>Tab 3</Tab>
  </TabList>
  <TabContent>Content for Tab 1</TabContent>
  <TabContent>Content for Tab 2</TabContent>
  <TabContent>Content for Tab 3</TabContent>
</Tabs>""",

    # ---------- FEEDBACK ----------
    ComponentName.Banner: """import { Banner } from '@visa/nova-react';

<Banner>
  Important notification message
</Banner>""",

    ComponentName.SectionMessage: """import { SectionMessage } from '@visa/nova-react';

<SectionMessage>
  Information message for users
</SectionMessage>""",

    ComponentName.Badge: """import { Badge } from '@visa/nova-react';

<Badge>New</Badge>""",

    # ---------- USER INTERFACE ----------
    ComponentName.Avatar: """import { Avatar } from '@visa/nova-react';

<Avatar alt="User Name" src="/user-avatar.jpg" />""",

    ComponentName.Tooltip: """import { Button, Tooltip } from '@visa/nova-react';

<Tooltip content="Helpful tooltip text">
  <Button>Hover me</Button>
</Tooltip>""",

    ComponentName.Dialog: """import { Button, Dialog, DialogBody, DialogFooter, DialogHeader, DialogTitle } from '@visa/nova-react';

<Dialog>
  <DialogHeader>
    <DialogTitle>Dialog Title</DialogTitle>
  </DialogHeader>
  <DialogBody>
    Dialog content goes here
  </DialogBody>
  <DialogFooter>
    <Button>Confirm</Button>
    <Button colorScheme="secondary">Cancel</Button>
  </DialogFooter>
</Dialog>""",

    # ---------- INTERACTIVE ----------
    ComponentName.Accordion: """import { Accordion, AccordionItem } from '@visa/nova-react';

<Accordion>
  <AccordionItem title="Section 1">
    Content for section 1
  </AccordionItem>
  <AccordionItem title="Section 2">
    Content for section 2
  </AccordionItem>
</Accordion>""",

    ComponentName.Switch: """import { Label, Switch, Utility } from '@visa/nova-react';

<Utility vAlignItems="center" vFlex vGap={2}>
  <Switch id="switch" />
  <Label htmlFor="switch">Enable feature</Label>
</Utility>""",

    ComponentName.Slider: """import { Label, Slider, Utility } from '@visa/nova-react';

<Utility vFlex vFlexCol vGap={4}>
  <Label htmlFor="slider">Volume</Label>
  <Slider id="slider" min={0} max={100} defaultValue={50} />
</Utility>""",

    # ---------- DATA DISPLAY ----------
    ComponentName.Table: """import { Table, TableBody, TableCell, TableHead, TableHeader, TableRow } from '@visa/nova-react';

<Table>
  <TableHeader>
    <TableRow>
      <TableHead>Name</TableHead>
      <TableHead>Email</TableHead>
      <TableHead>Status</TableHead>
    </TableRow>
  </TableHeader>
  <TableBody>
    <TableRow>
      <TableCell>John Doe</TableCell>
      <TableCell>john@example.com</TableCell>
      <TableCell>Active</TableCell>
    </TableRow>
  </TableBody>
</Table>""",

    ComponentName.Progress: """import { Progress } from '@visa/nova-react';

<Progress value={75} max={100} aria-label="Loading progress" />""",

    ComponentName.Pagination: """import { Pagination, PaginationItem } from '@visa/nova-react';

<Pagination>
  <PaginationItem disabled>Previous</PaginationItem>
  <PaginationItem active>1</PaginationItem>
  <PaginationItem>2</PaginationItem>
  <PaginationItem>3</PaginationItem>
  <PaginationItem>Next</PaginationItem>
</Pagination>""",
}
